"""User domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for a stored user.

    Attributes:
        id: Identifier assigned by the store, never changes
        name: Display name
        phone: Optional phone number
    """

    id: int
    name: str
    phone: str | None = None
