"""Query service: fetch a user by id."""

from user_service.entities import UserEntity
from user_service.protocols import UserStore


class GetUserByIdService:
    """Load a single user through the repository."""

    def __init__(self, repository: UserStore) -> None:
        self._repository = repository

    @classmethod
    def create(cls, repository: UserStore) -> "GetUserByIdService":
        return cls(repository=repository)

    def execute(self, user_id: int) -> UserEntity:
        """Fetch a user.

        Raises:
            UserNotFoundError: If the user does not exist
            PersistenceError: For any other repository failure
        """
        self._validate(user_id)
        return self._repository.get_user_by_id(user_id)

    def _validate(self, user_id: int) -> None:
        """Access rules for reads. None are enforced yet."""

    @property
    def repository(self) -> UserStore:
        """Get the underlying repository (for testing)."""
        return self._repository
