"""Recipe catalog service."""

import logging

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session, aliased

from tender.models.recipe import LikedRecipe, Recipe
from tender.models.user import User
from tender.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate

logger = logging.getLogger(__name__)


def likes_count_column():
    """Correlated like count per recipe, computed at read time rather than stored."""
    counted = aliased(LikedRecipe)
    return (
        select(func.count(counted.id))
        .where(counted.recipe_id == Recipe.id)
        .correlate(Recipe)
        .scalar_subquery()
        .label("likes_count")
    )


class RecipeService:
    """Service for catalog reads and recipe authoring."""

    def __init__(self, db: Session):
        self.db = db

    def _recipes_with_likes(self):
        return self.db.query(Recipe, likes_count_column())

    def list_catalog(self) -> list[RecipeResponse]:
        """All recipes, oldest first."""
        rows = self._recipes_with_likes().order_by(Recipe.id).all()
        return [RecipeResponse.from_recipe(recipe, count) for recipe, count in rows]

    def get(self, recipe_id: int) -> RecipeResponse | None:
        row = self._recipes_with_likes().filter(Recipe.id == recipe_id).first()
        if row is None:
            return None
        recipe, count = row
        return RecipeResponse.from_recipe(recipe, count)

    def list_created_by(self, user_id: int) -> list[RecipeResponse]:
        """Recipes a user authored, newest first."""
        rows = (
            self._recipes_with_likes()
            .filter(Recipe.created_by == user_id)
            .order_by(Recipe.created_at.desc(), Recipe.id.desc())
            .all()
        )
        return [RecipeResponse.from_recipe(recipe, count) for recipe, count in rows]

    def list_liked_by(self, user_id: int) -> list[RecipeResponse]:
        """Recipes a user liked, most recently liked first."""
        rows = (
            self._recipes_with_likes()
            .join(LikedRecipe, LikedRecipe.recipe_id == Recipe.id)
            .filter(LikedRecipe.user_id == user_id)
            .order_by(LikedRecipe.liked_at.desc(), LikedRecipe.id.desc())
            .all()
        )
        return [RecipeResponse.from_recipe(recipe, count) for recipe, count in rows]

    def get_editable(self, recipe_id: int, user: User) -> Recipe:
        """Get a recipe the user may modify (its creator, or any admin)."""
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        if recipe.created_by != user.id and not user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only modify your own recipes",
            )
        return recipe

    def create(self, user_id: int | None, data: RecipeCreate) -> RecipeResponse:
        """Create a recipe. A null user_id adds it as catalog seed data."""
        recipe = Recipe(
            name=data.name,
            description=data.description,
            cook_time=data.cook_time,
            servings=data.servings,
            difficulty=data.difficulty,
            cuisine=data.cuisine,
            emoji=data.emoji,
            image=data.image,
            source_link=data.source_link,
            ingredients=data.ingredients,
            instructions=data.instructions,
            created_by=user_id,
        )
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        logger.info(f"Created recipe {recipe.id} '{recipe.name}' for user {user_id}")
        return RecipeResponse.from_recipe(recipe, 0)

    def update(self, recipe: Recipe, data: RecipeUpdate) -> RecipeResponse:
        """Apply the fields present in the update."""
        changes = data.model_dump(exclude_unset=True)
        for field in ("name", "difficulty", "emoji", "cook_time", "servings"):
            # Required columns: an explicit null leaves them unchanged
            if field in changes and changes[field] is None:
                changes.pop(field)
        for field in ("description", "cuisine", "ingredients", "instructions"):
            if field in changes and changes[field] is None:
                changes[field] = ""
        for field, value in changes.items():
            setattr(recipe, field, value)
        self.db.commit()
        return self.get(recipe.id)

    def delete(self, recipe: Recipe) -> None:
        """Delete a recipe along with its likes, dislikes and meal plan entries."""
        recipe_id = recipe.id
        self.db.delete(recipe)
        self.db.commit()
        logger.info(f"Deleted recipe {recipe_id}")
