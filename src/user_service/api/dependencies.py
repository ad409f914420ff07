"""Dependency injection configuration for the FastAPI app.

Uses FastAPI's app.state pattern for storing layer instances.

Pattern:
    - Repository, services and handler built once during lifespan
    - Dependency functions retrieve them from request.app.state
    - No module-level database handle
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from sqlalchemy import Engine

from user_service.config import Settings, get_settings
from user_service.database import check_connection, create_db_engine, init_schema
from user_service.handlers import UserHandler
from user_service.repositories import SqlAlchemyUserRepository, UserStore
from user_service.services import CreateUserService, GetUserByIdService

logger = logging.getLogger(__name__)


def get_user_handler(request: Request) -> UserHandler:
    """Dependency injection for UserHandler from app.state.

    Raises:
        RuntimeError: If the handler is not initialized
    """
    handler = getattr(request.app.state, "user_handler", None)
    if handler is None:
        raise RuntimeError("UserHandler not initialized. Check lifespan setup.")
    return handler


def build_user_handler(repository: UserStore) -> UserHandler:
    """Wire services and handler on top of a repository."""
    return UserHandler(
        get_user_by_id_service=GetUserByIdService.create(repository=repository),
        create_user_service=CreateUserService.create(repository=repository),
    )


def make_lifespan(settings: Settings | None = None, engine: Engine | None = None):
    """Build the lifespan context manager for the app.

    Args:
        settings: Settings to use. If None, loaded from the environment on startup.
        engine: Pre-built engine (tests). If None, one is created from settings
            and disposed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        db_engine = engine
        if db_engine is None:
            cfg = settings or get_settings()
            db_engine = create_db_engine(cfg.database_dsn, echo=cfg.database_echo)

        if not check_connection(db_engine):
            logger.error("Database is not reachable, schema setup will fail")
        init_schema(db_engine)

        repository = SqlAlchemyUserRepository.create(db_engine)
        app.state.repository = repository
        app.state.user_handler = build_user_handler(repository)
        logger.info("User service initialized")

        yield

        del app.state.user_handler
        del app.state.repository
        if owns_engine:
            db_engine.dispose()
        logger.info("User service shut down")

    return lifespan


HandlerDep = Annotated[UserHandler, Depends(get_user_handler)]
