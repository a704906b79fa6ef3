"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from tender.api.dependencies import get_bearer_token, get_current_user, get_session_store
from tender.database import get_db
from tender.models.user import User
from tender.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from tender.schemas.common import SuccessResponse
from tender.services.auth import authenticate_user, create_user, get_user_by_email
from tender.services.sessions import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """Register a new user and start a session."""
    if get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = create_user(
        db,
        user_data.email,
        user_data.password,
        user_data.first_name,
        user_data.last_name,
        cooking_skill=user_data.cooking_skill,
        household_size=user_data.household_size,
        weekly_budget=user_data.weekly_budget,
        meals_per_week=user_data.meals_per_week,
        dietary=user_data.dietary,
        cuisines=user_data.cuisines,
    )
    logger.info(f"Registered user {user.id}")

    return AuthResponse(token=store.create(user.id), user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info(f"User {user.id} logged in")
    return AuthResponse(token=store.create(user.id), user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.post("/logout", response_model=SuccessResponse)
def logout(
    current_user: Annotated[User, Depends(get_current_user)],
    token: Annotated[str, Depends(get_bearer_token)],
    store: Annotated[SessionStore, Depends(get_session_store)],
):
    """End the presented session."""
    store.revoke(token)
    logger.info(f"User {current_user.id} logged out")
    return SuccessResponse()
