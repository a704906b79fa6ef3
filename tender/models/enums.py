"""Enums for model fields."""

from enum import Enum


class DietaryRestriction(str, Enum):
    """Dietary restriction labels a user can opt into."""

    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    KETO = "keto"
    HALAL = "halal"
    KOSHER = "kosher"


class Difficulty(str, Enum):
    """Recipe difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MealType(str, Enum):
    """Slots within a planned day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ItemCategory(str, Enum):
    """Categories used for grocery and fridge items."""

    PRODUCE = "Produce"
    DAIRY = "Dairy"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    GRAINS = "Grains"
    BEVERAGES = "Beverages"
    CONDIMENTS = "Condiments"
    FROZEN = "Frozen"
    SNACKS = "Snacks"
    OTHER = "Other"
