"""User profile schemas."""

from pydantic import BaseModel, ConfigDict, Field

from tender.models.enums import DietaryRestriction


class ProfileUpdate(BaseModel):
    """Partial profile update. Lists replace the stored sets when given."""

    model_config = ConfigDict(use_enum_values=True)

    first_name: str | None = Field(None, min_length=1, max_length=255)
    last_name: str | None = Field(None, min_length=1, max_length=255)
    cooking_skill: str | None = Field(None, max_length=50)
    household_size: str | None = Field(None, max_length=20)
    weekly_budget: str | None = Field(None, max_length=50)
    meals_per_week: str | None = Field(None, max_length=20)
    dietary: list[DietaryRestriction] | None = None
    cuisines: list[str] | None = None


class PasswordChange(BaseModel):
    """Change password request."""

    old_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=8, max_length=128)


class UserStats(BaseModel):
    """Counters shown on the profile page."""

    liked_count: int
    grocery_count: int
    meal_plan_count: int
    member_days: int
