"""Recipe schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from tender.models.enums import DietaryRestriction, Difficulty
from tender.models.recipe import DEFAULT_RECIPE_EMOJI, Recipe
from tender.services.dietary import join_ingredients

SOURCE_LINK_ALIASES = AliasChoices("source_link", "source_url", "sourceLink", "sourceUrl", "link")


def _ingredients_to_text(value: Any) -> Any:
    """Accept ingredients as a list or as already-serialized text."""
    if isinstance(value, list):
        return join_ingredients(str(item) for item in value)
    return value


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., max_length=255)
    description: str = Field("", max_length=2000)
    cook_time: int = Field(0, ge=0, validation_alias=AliasChoices("cook_time", "cookTime"))
    servings: int = Field(4, ge=1)
    difficulty: Difficulty = Difficulty.MEDIUM
    cuisine: str = Field("", max_length=100)
    emoji: str = Field(DEFAULT_RECIPE_EMOJI, max_length=16)
    image: str | None = None
    source_link: str | None = Field(None, validation_alias=SOURCE_LINK_ALIASES)
    ingredients: str = ""
    instructions: str = Field("", max_length=50000)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Recipe name is required")
        return value

    @field_validator("cuisine")
    @classmethod
    def lower_cuisine(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("ingredients", mode="before")
    @classmethod
    def ingredients_as_text(cls, value: Any) -> Any:
        return _ingredients_to_text(value)


class RecipeUpdate(BaseModel):
    """Update a recipe. Only fields present in the request are applied."""

    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)
    cook_time: int | None = Field(None, ge=0, validation_alias=AliasChoices("cook_time", "cookTime"))
    servings: int | None = Field(None, ge=1)
    difficulty: Difficulty | None = None
    cuisine: str | None = Field(None, max_length=100)
    emoji: str | None = Field(None, max_length=16)
    image: str | None = None
    source_link: str | None = Field(None, validation_alias=SOURCE_LINK_ALIASES)
    ingredients: str | None = None
    instructions: str | None = Field(None, max_length=50000)
    dietary_overrides: list[DietaryRestriction] | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("Recipe name cannot be empty")
        return value

    @field_validator("cuisine")
    @classmethod
    def lower_cuisine(cls, value: str | None) -> str | None:
        return value.strip().lower() if value is not None else None

    @field_validator("ingredients", mode="before")
    @classmethod
    def ingredients_as_text(cls, value: Any) -> Any:
        return _ingredients_to_text(value)


class RecipeResponse(BaseModel):
    """Recipe with ingredients expanded and like count attached."""

    id: int
    name: str
    description: str
    cook_time: int
    servings: int
    difficulty: str
    cuisine: str
    emoji: str
    image: str | None
    source_link: str | None
    ingredients: list[str]
    instructions: str
    likes_count: int
    created_by: int | None
    created_at: datetime
    dietary_overrides: list[str]

    @classmethod
    def from_recipe(cls, recipe: Recipe, likes_count: int | None = 0) -> "RecipeResponse":
        """Build a response from a recipe row and its derived like count."""
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description or "",
            cook_time=recipe.cook_time or 0,
            servings=recipe.servings,
            difficulty=recipe.difficulty,
            cuisine=recipe.cuisine or "",
            emoji=recipe.emoji,
            image=recipe.image or None,
            source_link=recipe.source_link or None,
            ingredients=recipe.ingredient_list,
            instructions=recipe.instructions or "",
            likes_count=int(likes_count or 0),
            created_by=recipe.created_by,
            created_at=recipe.created_at,
            dietary_overrides=list(recipe.dietary_overrides or []),
        )


class ReactionResponse(BaseModel):
    """Where a recipe stands for the current user."""

    recipe_id: int
    reaction: Literal["liked", "disliked", "unseen"]
