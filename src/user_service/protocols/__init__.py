"""Protocol interfaces for swappable implementations.

Protocols use structural typing, so any class with matching methods
satisfies them without inheriting from anything. Each service protocol
covers exactly one use case.

Usage:
    ```python
    from user_service.protocols import UserStore

    repo: UserStore = SqlAlchemyUserRepository(session_factory)
    repo: UserStore = InMemoryUserStore()  # e.g. in tests
    ```
"""

from .user_services import CreateUserCommand, GetUserByIdQuery
from .user_store import UserStore

__all__ = [
    "UserStore",
    "CreateUserCommand",
    "GetUserByIdQuery",
]
