"""Command service: create a user."""

from user_service.entities import UserEntity
from user_service.protocols import UserStore


class CreateUserService:
    """Create a single user through the repository.

    Repository errors are not caught here; they reach the handler as
    raised.

    Example:
        ```python
        service = CreateUserService.create(repository=SqlAlchemyUserRepository.create(engine))
        user = service.execute("Ada", "123")
        ```
    """

    def __init__(self, repository: UserStore) -> None:
        """Initialize the service.

        Args:
            repository: User storage backend (required).
        """
        self._repository = repository

    @classmethod
    def create(cls, repository: UserStore) -> "CreateUserService":
        """Factory method, mirrors the other services."""
        return cls(repository=repository)

    def execute(self, name: str, phone: str | None) -> UserEntity:
        """Create a user.

        Args:
            name: The user's name
            phone: Optional phone number

        Returns:
            The created user, with its assigned id

        Raises:
            PersistenceError: If the repository insert fails
        """
        self._validate(name, phone)
        return self._repository.create_user(name=name, phone=phone)

    def _validate(self, name: str, phone: str | None) -> None:
        """Business rules for new users. None are enforced yet."""

    @property
    def repository(self) -> UserStore:
        """Get the underlying repository (for testing)."""
        return self._repository
