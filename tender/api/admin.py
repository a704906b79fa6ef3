"""Admin bootstrap endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tender.api.dependencies import get_current_user, require_admin
from tender.database import get_db
from tender.models.user import User
from tender.schemas.admin import AdminActionResponse, DemoteRequest, PromoteRequest
from tender.schemas.auth import UserResponse
from tender.services.auth import get_user_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/promote", response_model=AdminActionResponse)
def promote(
    data: PromoteRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Make a user an admin.

    While no admin exists any signed-in user may promote, which is how the
    first admin is created. After that only admins can.
    """
    has_admin = db.query(User.id).filter(User.is_admin.is_(True)).first() is not None
    if has_admin and not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")

    target = get_user_by_email(db, data.email) if data.email else current_user
    if target is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    target.is_admin = True
    db.commit()
    db.refresh(target)
    logger.info(f"User {current_user.id} promoted user {target.id} to admin")
    return AdminActionResponse(user=UserResponse.model_validate(target))


@router.post("/demote", response_model=AdminActionResponse)
def demote(
    data: DemoteRequest,
    current_user: Annotated[User, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove a user's admin rights."""
    target = get_user_by_email(db, data.email)
    if target is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    target.is_admin = False
    db.commit()
    db.refresh(target)
    logger.info(f"User {current_user.id} demoted user {target.id}")
    return AdminActionResponse(user=UserResponse.model_validate(target))
