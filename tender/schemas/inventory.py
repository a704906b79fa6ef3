"""Grocery and fridge schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_item_name(value: str | None) -> str | None:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Item name cannot be blank")
    return value


class GroceryItemCreate(BaseModel):
    """Add an item to the grocery list."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(1, gt=0)
    unit: str = Field("", max_length=50)
    category: str = Field("Other", max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _strip_item_name(value)


class GroceryItemUpdate(BaseModel):
    """Update a grocery item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    quantity: float | None = Field(None, gt=0)
    checked: bool | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return _strip_item_name(value)


class GroceryItemResponse(BaseModel):
    """Grocery item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    quantity: float
    unit: str
    category: str
    checked: bool
    added_at: datetime


class FridgeItemCreate(BaseModel):
    """Add an item to the fridge."""

    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(1, gt=0)
    unit: str = Field("", max_length=50)
    category: str = Field("Other", max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _strip_item_name(value)


class FridgeItemResponse(BaseModel):
    """Fridge item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    quantity: float
    unit: str
    category: str
    added_at: datetime


class FridgeBulkAddRequest(BaseModel):
    """Bulk add items to the fridge (e.g. accepted scan results)."""

    items: list[FridgeItemCreate]


class FridgeBulkAddResponse(BaseModel):
    """Result of bulk adding to the fridge."""

    added: int
    updated: int
    items: list[FridgeItemResponse]


class FridgeScanRequest(BaseModel):
    """Photo of a fridge or pantry, base64-encoded."""

    image: str = Field(..., min_length=1)
    media_type: Literal["image/jpeg", "image/png", "image/gif", "image/webp"] = "image/jpeg"


class ScannedIngredient(BaseModel):
    """An ingredient guessed from a photo."""

    name: str
    quantity: float = 1
    category: str = "Other"


class FridgeScanResponse(BaseModel):
    """Ingredients recognized in a photo."""

    ingredients: list[ScannedIngredient]
