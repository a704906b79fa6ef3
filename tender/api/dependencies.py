"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tender.database import get_db
from tender.models.user import User
from tender.services.auth import get_user_by_id
from tender.services.discovery import DiscoveryService
from tender.services.fridge_scan import FridgeScanService
from tender.services.meal_plan import MealPlanService
from tender.services.recipe_service import RecipeService
from tender.services.sessions import SessionStore
from tender.services.sessions import get_session_store as _get_session_store

security = HTTPBearer(auto_error=False)


def get_session_store() -> SessionStore:
    """Get the configured session store."""
    return _get_session_store()


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Extract the bearer token, or reject the request."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials


def get_current_user(
    token: Annotated[str, Depends(get_bearer_token)],
    store: Annotated[SessionStore, Depends(get_session_store)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the session token."""
    user_id = store.get(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Only let admins through."""
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_discovery_service(
    db: Annotated[Session, Depends(get_db)],
) -> DiscoveryService:
    """Get discovery service with dependencies."""
    return DiscoveryService(db)


def get_meal_plan_service(
    db: Annotated[Session, Depends(get_db)],
) -> MealPlanService:
    return MealPlanService(db)


def get_fridge_scan_service() -> FridgeScanService:
    """Get fridge scan service instance."""
    return FridgeScanService()
