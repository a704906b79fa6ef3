"""Fridge inventory API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tender.api.dependencies import get_current_user, get_fridge_scan_service
from tender.database import get_db
from tender.models.inventory import FridgeItem
from tender.models.user import User
from tender.schemas.common import SuccessResponse
from tender.schemas.inventory import (
    FridgeBulkAddRequest,
    FridgeBulkAddResponse,
    FridgeItemCreate,
    FridgeItemResponse,
    FridgeScanRequest,
    FridgeScanResponse,
)
from tender.services.fridge_scan import FridgeScanService, ScanFailedError, ScanNotConfiguredError
from tender.services.inventory import add_or_increment, clear_items, get_user_item, list_items

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/fridge", tags=["fridge"])


@router.get("", response_model=list[FridgeItemResponse])
def list_fridge_items(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """What's in the current user's fridge, newest first."""
    return list_items(db, FridgeItem, current_user.id)


@router.post("", response_model=FridgeItemResponse, status_code=status.HTTP_201_CREATED)
def add_fridge_item(
    data: FridgeItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    item, _ = add_or_increment(
        db, FridgeItem, current_user.id, data.name, data.quantity, data.unit, data.category
    )
    db.commit()
    db.refresh(item)
    return item


@router.post("/bulk", response_model=FridgeBulkAddResponse, status_code=status.HTTP_201_CREATED)
def bulk_add_fridge_items(
    data: FridgeBulkAddRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add many items at once, merging with ones already in the fridge."""
    added = 0
    updated = 0
    items = []
    for entry in data.items:
        item, created = add_or_increment(
            db, FridgeItem, current_user.id, entry.name, entry.quantity, entry.unit, entry.category
        )
        if created:
            added += 1
        else:
            updated += 1
        if item not in items:
            items.append(item)

    db.commit()
    for item in items:
        db.refresh(item)

    return FridgeBulkAddResponse(
        added=added,
        updated=updated,
        items=[FridgeItemResponse.model_validate(item) for item in items],
    )


@router.post("/scan", response_model=FridgeScanResponse)
def scan_fridge(
    data: FridgeScanRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    scanner: Annotated[FridgeScanService, Depends(get_fridge_scan_service)],
):
    """Recognize ingredients in a photo. Nothing is added to the fridge."""
    try:
        ingredients = scanner.scan(data.image, data.media_type)
    except ScanNotConfiguredError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Fridge scanning is not configured",
        ) from e
    except ScanFailedError as e:
        logger.warning(f"Fridge scan failed for user {current_user.id}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    logger.info(f"Fridge scan for user {current_user.id} found {len(ingredients)} ingredients")
    return FridgeScanResponse(ingredients=ingredients)


@router.delete("/{item_id}", response_model=SuccessResponse)
def delete_fridge_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    item = get_user_item(db, FridgeItem, item_id, current_user.id)
    db.delete(item)
    db.commit()
    return SuccessResponse()


@router.delete("", response_model=SuccessResponse)
def clear_fridge(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Empty the fridge."""
    clear_items(db, FridgeItem, current_user.id)
    return SuccessResponse()
