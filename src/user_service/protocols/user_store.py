"""User storage protocol.

Defines the interface for any backend that can persist and load users.
"""

from typing import Protocol, runtime_checkable

from user_service.entities import UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user persistence backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.
    """

    def get_user_by_id(self, user_id: int) -> UserEntity:
        """Load a user by id.

        Args:
            user_id: The user identifier

        Returns:
            The stored user

        Raises:
            UserNotFoundError: If no user has this id
            PersistenceError: For any other store failure
        """
        ...

    def create_user(self, name: str, phone: str | None) -> UserEntity:
        """Insert a new user.

        Args:
            name: The user's name
            phone: Optional phone number

        Returns:
            The stored user, including its assigned id

        Raises:
            PersistenceError: If the insert fails
        """
        ...
