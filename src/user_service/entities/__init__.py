"""Domain entities for internal representation.

These are frozen dataclasses used by services and repositories. They are
NOT used for API contracts (see the dto package) and carry no ORM or
Pydantic dependencies.
"""

from .user import UserEntity

__all__ = ["UserEntity"]
