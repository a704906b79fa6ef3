"""Meal planner API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, status

from tender.api.dependencies import get_current_user, get_meal_plan_service
from tender.models.enums import MealType
from tender.models.user import User
from tender.schemas.common import SuccessResponse
from tender.schemas.meal_plan import MealPlanCreate, MealPlanEntryResponse
from tender.services.meal_plan import MealPlanService

router = APIRouter(prefix="/api/v1/mealplan", tags=["mealplan"])


@router.get("", response_model=list[MealPlanEntryResponse])
def list_meal_plan(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    """Planned meals by date, then meal type."""
    return service.list_entries(current_user.id)


@router.post("", response_model=SuccessResponse, status_code=status.HTTP_201_CREATED)
def set_meal(
    data: MealPlanCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    """Plan a recipe for a slot, replacing anything already there."""
    service.set_slot(current_user.id, data.recipe_id, data.plan_date, data.meal_type)
    return SuccessResponse()


@router.delete("/week/{start_date}", response_model=SuccessResponse)
def clear_week(
    start_date: date,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    """Clear the seven days starting at start_date."""
    service.clear_week(current_user.id, start_date)
    return SuccessResponse()


@router.delete("/{plan_date}/{meal_type}", response_model=SuccessResponse)
def clear_meal(
    plan_date: date,
    meal_type: MealType,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    service.clear_slot(current_user.id, plan_date, meal_type.value)
    return SuccessResponse()
