"""Admin schemas."""

from pydantic import BaseModel, EmailStr

from tender.schemas.auth import UserResponse


class PromoteRequest(BaseModel):
    """Promote a user to admin. Defaults to the caller when no email is given."""

    email: EmailStr | None = None


class DemoteRequest(BaseModel):
    """Demote an admin."""

    email: EmailStr


class AdminActionResponse(BaseModel):
    """Result of a promote or demote."""

    success: bool = True
    user: UserResponse
