"""User profile API endpoints."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tender.api.dependencies import get_current_user, get_session_store
from tender.database import get_db
from tender.models.meal_plan import MealPlanEntry
from tender.models.user import User
from tender.schemas.auth import UserResponse
from tender.schemas.common import SuccessResponse
from tender.schemas.user import PasswordChange, ProfileUpdate, UserStats
from tender.services.auth import get_password_hash, replace_cuisines, replace_dietary, verify_password
from tender.services.sessions import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def member_days(created_at: datetime, now: datetime | None = None) -> int:
    """Whole days since signup, counting the signup day as day one."""
    now = now or datetime.now(UTC)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return max(1, (now - created_at).days + 1)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    update: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update profile fields. Dietary and cuisine lists replace the stored sets."""
    changes = update.model_dump(exclude_unset=True)
    dietary = changes.pop("dietary", None)
    cuisines = changes.pop("cuisines", None)

    for field, value in changes.items():
        if value is not None:
            setattr(current_user, field, value)
    if dietary is not None:
        replace_dietary(current_user, dietary)
    if cuisines is not None:
        replace_cuisines(current_user, cuisines)

    db.commit()
    db.refresh(current_user)
    return current_user


@router.put("/password", response_model=SuccessResponse)
def change_password(
    data: PasswordChange,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Change password after checking the current one."""
    if not verify_password(data.old_password, current_user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        )
    if data.old_password == data.new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="New password must be different from the current password",
        )

    current_user.password_hash = get_password_hash(data.new_password)
    db.commit()
    logger.info(f"User {current_user.id} changed password")
    return SuccessResponse()


@router.delete("/account", response_model=SuccessResponse)
def delete_account(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """Delete the account and everything scoped to it."""
    user_id = current_user.id
    db.delete(current_user)
    db.commit()
    store.revoke_user(user_id)
    logger.info(f"Deleted account {user_id}")
    return SuccessResponse()


@router.get("/stats", response_model=UserStats)
def get_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Profile counters."""
    meal_plan_count = (
        db.query(MealPlanEntry).filter(MealPlanEntry.user_id == current_user.id).count()
    )
    return UserStats(
        liked_count=current_user.liked_count,
        grocery_count=current_user.grocery_count,
        meal_plan_count=meal_plan_count,
        member_days=member_days(current_user.created_at),
    )
