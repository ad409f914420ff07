"""User Service - layered CRUD web service for a single user entity.

Layers:
    - protocols: Interface contracts (UserStore, CreateUserCommand, GetUserByIdQuery)
    - repositories: Data access implementations
    - services: Business logic, one class per use case
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from user_service.database import create_db_engine
    from user_service.repositories import SqlAlchemyUserRepository
    from user_service.services import CreateUserService

    repo = SqlAlchemyUserRepository.create(create_db_engine("sqlite:///users.db"))
    CreateUserService.create(repository=repo).execute("Ada", "123")
    ```

For HTTP API:
    ```python
    from user_service.api.app import create_app
    ```
"""

from user_service.config import Settings, get_settings
from user_service.dto import CreateUserRequest, UserResponse
from user_service.entities import UserEntity
from user_service.errors import (
    ConfigurationError,
    PersistenceError,
    UserNotFoundError,
    UserServiceError,
    ValidationError,
)
from user_service.handlers import UserHandler
from user_service.protocols import CreateUserCommand, GetUserByIdQuery, UserStore
from user_service.repositories import SqlAlchemyUserRepository
from user_service.services import CreateUserService, GetUserByIdService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "UserServiceError",
    "ValidationError",
    "UserNotFoundError",
    "PersistenceError",
    "ConfigurationError",
    # Protocols (interfaces)
    "UserStore",
    "CreateUserCommand",
    "GetUserByIdQuery",
    # Services (business logic)
    "CreateUserService",
    "GetUserByIdService",
    # Handlers (HTTP)
    "UserHandler",
    # Repositories (data access)
    "SqlAlchemyUserRepository",
    # Entities (domain models)
    "UserEntity",
    # DTOs (API contracts)
    "CreateUserRequest",
    "UserResponse",
]
