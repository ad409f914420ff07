"""SQLAlchemy implementation of UserStore.

Works with any database SQLAlchemy supports (PostgreSQL in production,
SQLite in tests). Each call runs in its own short-lived session.
"""

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from user_service.database import create_session_factory
from user_service.entities import UserEntity
from user_service.errors import PersistenceError, UserNotFoundError
from user_service.models import UserRow

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """User repository backed by a SQLAlchemy session factory.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.

    It is the only component that talks to the database. NotFound is
    reported as UserNotFoundError; everything else the driver raises is
    wrapped in PersistenceError with the driver's message kept intact.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """Initialize the repository.

        Args:
            session_factory: Factory producing sessions bound to the user database.
        """
        self._session_factory = session_factory

    @classmethod
    def create(cls, engine: Engine) -> "SqlAlchemyUserRepository":
        """Factory method building the session factory from an engine.

        Args:
            engine: SQLAlchemy engine for the user database

        Returns:
            Configured SqlAlchemyUserRepository
        """
        return cls(session_factory=create_session_factory(engine))

    def get_user_by_id(self, user_id: int) -> UserEntity:
        """Load a user by primary key.

        Args:
            user_id: The user identifier

        Returns:
            The stored user

        Raises:
            UserNotFoundError: If no row has this id
            PersistenceError: If the query fails
        """
        try:
            with self._session_factory() as session:
                row = session.get(UserRow, user_id)
                user = row.to_entity() if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to load user {user_id}: {e}")
            raise PersistenceError(str(e), "query") from e

        if user is None:
            logger.info("User not found", extra={"user_id": user_id})
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, name: str, phone: str | None) -> UserEntity:
        """Insert a user in a single statement and commit.

        Args:
            name: The user's name
            phone: Optional phone number

        Returns:
            The stored user with the id assigned by the database

        Raises:
            PersistenceError: If the insert or commit fails
        """
        row = UserRow(name=name, phone=phone)
        with self._session_factory() as session:
            try:
                session.add(row)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"Failed to create user: {e}")
                raise PersistenceError(str(e), "insert") from e
            user = row.to_entity()

        logger.info("User created", extra={"user_id": user.id})
        return user
