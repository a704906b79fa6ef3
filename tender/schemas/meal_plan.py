"""Meal plan schemas."""

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tender.models.enums import MealType


class MealPlanCreate(BaseModel):
    """Put a recipe into a (date, meal type) slot."""

    model_config = ConfigDict(use_enum_values=True)

    recipe_id: int = Field(..., validation_alias=AliasChoices("recipe_id", "recipeId"))
    plan_date: dt.date = Field(..., validation_alias=AliasChoices("plan_date", "date"))
    meal_type: MealType = Field(..., validation_alias=AliasChoices("meal_type", "mealType"))


class MealPlanEntryResponse(BaseModel):
    """Meal plan entry with recipe display fields."""

    id: int
    recipe_id: int
    plan_date: dt.date
    meal_type: str
    recipe_name: str
    recipe_emoji: str
