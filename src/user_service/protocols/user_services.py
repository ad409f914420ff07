"""Use-case protocols consumed by the handler layer."""

from typing import Protocol, runtime_checkable

from user_service.entities import UserEntity


@runtime_checkable
class CreateUserCommand(Protocol):
    """Command: create one user."""

    def execute(self, name: str, phone: str | None) -> UserEntity: ...


@runtime_checkable
class GetUserByIdQuery(Protocol):
    """Query: fetch one user by id."""

    def execute(self, user_id: int) -> UserEntity: ...
