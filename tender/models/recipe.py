"""Recipe model and like/dislike relations."""

from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from tender.database import Base
from tender.models.mixins import TimestampMixin
from tender.services.dietary import split_ingredients

DEFAULT_RECIPE_EMOJI = "🍽️"


class Recipe(Base, TimestampMixin):
    """Catalog recipe. A null creator marks seeded catalog data."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    cook_time = Column(Integer, nullable=False, default=0)  # Minutes
    servings = Column(Integer, nullable=False, default=4)
    difficulty = Column(String(20), nullable=False, default="medium")
    cuisine = Column(String(100), nullable=False, default="")  # Lower-cased
    emoji = Column(String(16), nullable=False, default=DEFAULT_RECIPE_EMOJI)
    image = Column(Text, nullable=True)
    source_link = Column(Text, nullable=True)
    # Comma- or newline-separated free text
    ingredients = Column(Text, nullable=False, default="")
    instructions = Column(Text, nullable=False, default="")
    created_by = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    # Restriction labels this recipe has been manually cleared for
    dietary_overrides = Column(JSON, nullable=True)

    # Relationships
    creator = relationship("User", backref="created_recipes")
    likes = relationship("LikedRecipe", back_populates="recipe", cascade="all, delete-orphan")
    dislikes = relationship(
        "DislikedRecipe", back_populates="recipe", cascade="all, delete-orphan"
    )
    meal_plan_entries = relationship(
        "MealPlanEntry", back_populates="recipe", cascade="all, delete-orphan"
    )

    @property
    def ingredient_list(self) -> list[str]:
        """Ingredients expanded from their stored text form."""
        return split_ingredients(self.ingredients)


class LikedRecipe(Base):
    """A user's like of a recipe."""

    __tablename__ = "liked_recipes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_liked_user_recipe"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    liked_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    user = relationship("User", back_populates="liked_recipes")
    recipe = relationship("Recipe", back_populates="likes")


class DislikedRecipe(Base):
    """A user's dislike of a recipe."""

    __tablename__ = "disliked_recipes"
    __table_args__ = (UniqueConstraint("user_id", "recipe_id", name="uq_disliked_user_recipe"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    recipe_id = Column(
        Integer, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    disliked_at = Column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False
    )

    user = relationship("User", back_populates="disliked_recipes")
    recipe = relationship("Recipe", back_populates="dislikes")
