"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request DTO for creating a user.

    The handler parses the raw body into this model itself so that parse
    failures map to a fixed error message.
    """

    name: str = Field(..., description="The user's name")
    phone: str | None = Field(None, description="Optional phone number")
