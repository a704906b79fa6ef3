"""Meal planner service."""

from datetime import date, timedelta

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from tender.models.meal_plan import MealPlanEntry
from tender.models.recipe import Recipe
from tender.schemas.meal_plan import MealPlanEntryResponse


class MealPlanService:
    """Service for a user's planned meals."""

    def __init__(self, db: Session):
        self.db = db

    def list_entries(self, user_id: int) -> list[MealPlanEntryResponse]:
        """Planned meals ordered by date, then meal type."""
        rows = (
            self.db.query(MealPlanEntry, Recipe.name, Recipe.emoji)
            .join(Recipe, MealPlanEntry.recipe_id == Recipe.id)
            .filter(MealPlanEntry.user_id == user_id)
            .order_by(MealPlanEntry.plan_date, MealPlanEntry.meal_type)
            .all()
        )
        return [
            MealPlanEntryResponse(
                id=entry.id,
                recipe_id=entry.recipe_id,
                plan_date=entry.plan_date,
                meal_type=entry.meal_type,
                recipe_name=name,
                recipe_emoji=emoji,
            )
            for entry, name, emoji in rows
        ]

    def set_slot(self, user_id: int, recipe_id: int, plan_date: date, meal_type: str) -> MealPlanEntry:
        """Put a recipe into a slot, replacing whatever was planned there."""
        if not self.db.query(Recipe.id).filter(Recipe.id == recipe_id).first():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")

        entry = (
            self.db.query(MealPlanEntry)
            .filter(
                MealPlanEntry.user_id == user_id,
                MealPlanEntry.plan_date == plan_date,
                MealPlanEntry.meal_type == meal_type,
            )
            .first()
        )
        if entry:
            entry.recipe_id = recipe_id
        else:
            entry = MealPlanEntry(
                user_id=user_id, recipe_id=recipe_id, plan_date=plan_date, meal_type=meal_type
            )
            self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def clear_slot(self, user_id: int, plan_date: date, meal_type: str) -> None:
        self.db.query(MealPlanEntry).filter(
            MealPlanEntry.user_id == user_id,
            MealPlanEntry.plan_date == plan_date,
            MealPlanEntry.meal_type == meal_type,
        ).delete(synchronize_session=False)
        self.db.commit()

    def clear_week(self, user_id: int, start_date: date) -> int:
        """Remove entries in the seven days starting at start_date."""
        deleted = (
            self.db.query(MealPlanEntry)
            .filter(
                MealPlanEntry.user_id == user_id,
                MealPlanEntry.plan_date >= start_date,
                MealPlanEntry.plan_date < start_date + timedelta(days=7),
            )
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
