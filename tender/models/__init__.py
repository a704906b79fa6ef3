"""SQLAlchemy models."""

from tender.models.inventory import FridgeItem, GroceryItem
from tender.models.meal_plan import MealPlanEntry
from tender.models.recipe import DislikedRecipe, LikedRecipe, Recipe
from tender.models.user import User, UserCuisine, UserDietary

__all__ = [
    "User",
    "UserDietary",
    "UserCuisine",
    "Recipe",
    "LikedRecipe",
    "DislikedRecipe",
    "GroceryItem",
    "FridgeItem",
    "MealPlanEntry",
]
