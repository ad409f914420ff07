"""FastAPI application factory and entry point."""

from fastapi import FastAPI
from sqlalchemy import Engine

from user_service.api.dependencies import make_lifespan
from user_service.api.error_handlers import register_error_handlers
from user_service.api.router import router
from user_service.config import Settings


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Create the user service app.

    Args:
        settings: Settings for the database connection. If None, loaded from
            the environment when the app starts.
        engine: Pre-built SQLAlchemy engine, mainly for tests.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="User Service API",
        description="Create and fetch users",
        version="0.1.0",
        lifespan=make_lifespan(settings=settings, engine=engine),
    )
    register_error_handlers(app)
    app.include_router(router)
    return app
