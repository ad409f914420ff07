"""Service layer for business logic.

One service per use case: CreateUserService is the command,
GetUserByIdService is the query. Services depend on the UserStore
protocol, not on a concrete repository.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from user_service.services import CreateUserService, GetUserByIdService

    create_user = CreateUserService.create(repository=repo)
    get_user = GetUserByIdService.create(repository=repo)
    ```
"""

from .create_user_service import CreateUserService
from .get_user_by_id_service import GetUserByIdService

__all__ = [
    "CreateUserService",
    "GetUserByIdService",
]
