"""Database bootstrap: engine, session factory and schema creation.

The engine and session factory are created once by the application and
passed explicitly to the repository.
"""

import logging

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from user_service.models import Base

logger = logging.getLogger(__name__)


def create_db_engine(dsn: str, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the given DSN.

    In-memory SQLite gets a single shared connection so every session sees
    the same database.
    """
    if dsn.startswith("sqlite") and (":memory:" in dsn or dsn.rstrip("/") == "sqlite:"):
        return create_engine(
            dsn,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if dsn.startswith("sqlite"):
        return create_engine(dsn, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(dsn, echo=echo, pool_pre_ping=True, pool_recycle=3600)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """Create any missing tables."""
    Base.metadata.create_all(engine)
    logger.info("Database schema ready")


def check_connection(engine: Engine) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection check failed: {e}")
        return False
