"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

from user_service.entities import UserEntity


class UserResponse(BaseModel):
    """Serialized user."""

    id: int = Field(..., description="Identifier assigned by the store")
    name: str = Field(..., description="The user's name")
    phone: str | None = Field(None, description="Phone number, null when not given")

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        return cls(id=user.id, name=user.name, phone=user.phone)


class MessageResponse(BaseModel):
    """Static confirmation message."""

    message: str = Field(..., description="Human-readable status message")


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing endpoint."""

    error: str = Field(..., description="Error message")
