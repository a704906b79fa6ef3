"""Grocery list and fridge inventory operations."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from tender.models.inventory import FridgeItem, GroceryItem

logger = logging.getLogger(__name__)

InventoryModel = type[GroceryItem] | type[FridgeItem]


def normalize_name(name: str) -> str:
    return name.lower().strip()


def add_or_increment(
    db: Session,
    model: InventoryModel,
    user_id: int,
    name: str,
    quantity: float = 1,
    unit: str = "",
    category: str = "Other",
) -> tuple[GroceryItem | FridgeItem, bool]:
    """Add an item, or add to the quantity of the user's item with the same name.

    Names match case-insensitively. Returns the item and whether it was created.
    The caller commits.
    """
    normalized = normalize_name(name)
    existing = (
        db.query(model)
        .filter(model.user_id == user_id, model.normalized_name == normalized)
        .first()
    )
    if existing:
        existing.quantity = existing.quantity + quantity
        db.flush()
        return existing, False

    item = model(
        user_id=user_id,
        name=name.strip(),
        normalized_name=normalized,
        quantity=quantity,
        unit=unit,
        category=category or "Other",
    )
    db.add(item)
    db.flush()
    return item, True


def list_items(db: Session, model: InventoryModel, user_id: int) -> list:
    """A user's items, most recently added first."""
    return (
        db.query(model)
        .filter(model.user_id == user_id)
        .order_by(model.added_at.desc(), model.id.desc())
        .all()
    )


def get_user_item(db: Session, model: InventoryModel, item_id: int, user_id: int):
    """Get an item that belongs to the user."""
    item = db.query(model).filter(model.id == item_id, model.user_id == user_id).first()
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


def clear_items(db: Session, model: InventoryModel, user_id: int) -> int:
    """Remove all of a user's items."""
    deleted = db.query(model).filter(model.user_id == user_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Cleared {deleted} {model.__tablename__} rows for user {user_id}")
    return deleted
