"""Meal plan entry model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from tender.database import Base


class MealPlanEntry(Base):
    """One recipe planned into a (date, meal type) slot."""

    __tablename__ = "meal_plans"
    __table_args__ = (
        UniqueConstraint("user_id", "plan_date", "meal_type", name="uq_meal_plan_slot"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    plan_date = Column(Date, nullable=False)
    meal_type = Column(String(20), nullable=False)  # "breakfast" | "lunch" | "dinner" | "snack"

    user = relationship("User", back_populates="meal_plan_entries")
    recipe = relationship("Recipe", back_populates="meal_plan_entries")
