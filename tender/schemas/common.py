"""Shared response schemas."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Acknowledgment for mutations with nothing else to return."""

    success: bool = True
