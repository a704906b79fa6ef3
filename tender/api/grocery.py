"""Grocery list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tender.api.dependencies import get_current_user
from tender.database import get_db
from tender.models.inventory import GroceryItem
from tender.models.user import User
from tender.schemas.common import SuccessResponse
from tender.schemas.inventory import GroceryItemCreate, GroceryItemResponse, GroceryItemUpdate
from tender.services.inventory import (
    add_or_increment,
    clear_items,
    get_user_item,
    list_items,
    normalize_name,
)

router = APIRouter(prefix="/api/v1/grocery", tags=["grocery"])


@router.get("", response_model=list[GroceryItemResponse])
def list_grocery_items(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """The current user's grocery list, newest first."""
    return list_items(db, GroceryItem, current_user.id)


@router.post("", response_model=GroceryItemResponse, status_code=status.HTTP_201_CREATED)
def add_grocery_item(
    data: GroceryItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an item, or increase the quantity of one with the same name."""
    item, _ = add_or_increment(
        db, GroceryItem, current_user.id, data.name, data.quantity, data.unit, data.category
    )
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=GroceryItemResponse)
def update_grocery_item(
    item_id: int,
    data: GroceryItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    item = get_user_item(db, GroceryItem, item_id, current_user.id)

    if data.name is not None:
        normalized = normalize_name(data.name)
        clash = (
            db.query(GroceryItem.id)
            .filter(
                GroceryItem.user_id == current_user.id,
                GroceryItem.normalized_name == normalized,
                GroceryItem.id != item.id,
            )
            .first()
        )
        if clash:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An item with this name is already on the list",
            )
        item.name = data.name.strip()
        item.normalized_name = normalized
    if data.quantity is not None:
        item.quantity = data.quantity
    if data.checked is not None:
        item.checked = data.checked

    db.commit()
    db.refresh(item)
    return item


@router.post("/{item_id}/toggle", response_model=GroceryItemResponse)
def toggle_grocery_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Flip the checked flag."""
    item = get_user_item(db, GroceryItem, item_id, current_user.id)
    item.checked = not item.checked
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=SuccessResponse)
def delete_grocery_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    item = get_user_item(db, GroceryItem, item_id, current_user.id)
    db.delete(item)
    db.commit()
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
def clear_grocery_list(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Empty the grocery list."""
    clear_items(db, GroceryItem, current_user.id)
    return SuccessResponse()
