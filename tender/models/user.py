"""User model and per-user preference sets."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from tender.database import Base
from tender.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # Stored lower-cased
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    cooking_skill = Column(String(50), nullable=False, default="intermediate")
    household_size = Column(String(20), nullable=False, default="2")
    weekly_budget = Column(String(50), nullable=False, default="moderate")
    meals_per_week = Column(String(20), nullable=False, default="4-7")
    is_admin = Column(Boolean, nullable=False, default=False)

    # Relationships (everything scoped to the user goes with it)
    dietary_entries = relationship(
        "UserDietary", back_populates="user", cascade="all, delete-orphan"
    )
    cuisine_entries = relationship(
        "UserCuisine", back_populates="user", cascade="all, delete-orphan"
    )
    liked_recipes = relationship(
        "LikedRecipe", back_populates="user", cascade="all, delete-orphan"
    )
    disliked_recipes = relationship(
        "DislikedRecipe", back_populates="user", cascade="all, delete-orphan"
    )
    grocery_items = relationship(
        "GroceryItem", back_populates="user", cascade="all, delete-orphan"
    )
    fridge_items = relationship(
        "FridgeItem", back_populates="user", cascade="all, delete-orphan"
    )
    meal_plan_entries = relationship(
        "MealPlanEntry", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def dietary(self) -> list[str]:
        """Dietary restriction labels, sorted for stable output."""
        return sorted(entry.dietary for entry in self.dietary_entries)

    @property
    def cuisines(self) -> list[str]:
        """Preferred cuisine labels, sorted for stable output."""
        return sorted(entry.cuisine for entry in self.cuisine_entries)

    @property
    def liked_count(self) -> int:
        return len(self.liked_recipes)

    @property
    def grocery_count(self) -> int:
        return len(self.grocery_items)


class UserDietary(Base):
    """A single dietary restriction label held by a user."""

    __tablename__ = "user_dietary"
    __table_args__ = (UniqueConstraint("user_id", "dietary", name="uq_user_dietary"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    dietary = Column(String(50), nullable=False)

    user = relationship("User", back_populates="dietary_entries")


class UserCuisine(Base):
    """A single cuisine preference held by a user."""

    __tablename__ = "user_cuisines"
    __table_args__ = (UniqueConstraint("user_id", "cuisine", name="uq_user_cuisine"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    cuisine = Column(String(100), nullable=False)

    user = relationship("User", back_populates="cuisine_entries")
