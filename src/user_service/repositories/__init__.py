"""Repository layer for data access.

This layer hides the database behind the UserStore protocol. Services
only ever see the protocol, so tests can swap in a fake store and
production can swap databases without touching business logic.
"""

from user_service.protocols import UserStore

from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = [
    "UserStore",
    "SqlAlchemyUserRepository",
]
