"""Authentication and user schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tender.models.enums import DietaryRestriction


class UserRegister(BaseModel):
    """User registration request."""

    model_config = ConfigDict(use_enum_values=True)

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    cooking_skill: str | None = Field(None, max_length=50)
    household_size: str | None = Field(None, max_length=20)
    weekly_budget: str | None = Field(None, max_length=50)
    meals_per_week: str | None = Field(None, max_length=20)
    dietary: list[DietaryRestriction] = []
    cuisines: list[str] = []


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """User profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
    cooking_skill: str
    household_size: str
    weekly_budget: str
    meals_per_week: str
    dietary: list[str]
    cuisines: list[str]
    liked_count: int
    grocery_count: int
    is_admin: bool
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with session token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse
