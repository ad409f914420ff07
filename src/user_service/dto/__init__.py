"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract. Internal domain
logic uses entities from the entities package.
"""

from .requests import CreateUserRequest
from .responses import ErrorResponse, MessageResponse, UserResponse

__all__ = [
    "CreateUserRequest",
    "UserResponse",
    "MessageResponse",
    "ErrorResponse",
]
