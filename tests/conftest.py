"""Shared pytest fixtures."""

import os

# Settings are read from the environment; keep tests off any real database
os.environ.setdefault("DB_DSN", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient

from user_service.api.app import create_app
from user_service.database import create_db_engine, init_schema
from user_service.entities import UserEntity
from user_service.errors import PersistenceError, UserNotFoundError
from user_service.repositories import SqlAlchemyUserRepository


class FakeUserStore:
    """In-memory UserStore that records every call."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.users: dict[int, UserEntity] = {}
        self.calls: list[tuple] = []
        self._fail_with = fail_with

    def get_user_by_id(self, user_id: int) -> UserEntity:
        self.calls.append(("get_user_by_id", user_id))
        if self._fail_with is not None:
            raise self._fail_with
        if user_id not in self.users:
            raise UserNotFoundError(user_id)
        return self.users[user_id]

    def create_user(self, name: str, phone: str | None) -> UserEntity:
        self.calls.append(("create_user", name, phone))
        if self._fail_with is not None:
            raise self._fail_with
        user = UserEntity(id=len(self.users) + 1, name=name, phone=phone)
        self.users[user.id] = user
        return user


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_db_engine("sqlite:///:memory:")
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    return SqlAlchemyUserRepository.create(engine)


@pytest.fixture
def client(engine):
    """Test client running the full app against the in-memory database."""
    with TestClient(create_app(engine=engine)) as client:
        yield client


@pytest.fixture
def fake_store():
    return FakeUserStore()


@pytest.fixture
def failing_store():
    return FakeUserStore(fail_with=PersistenceError("connection refused", "query"))
