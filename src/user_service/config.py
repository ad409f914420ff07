import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from user_service.errors import ConfigurationError

# app.env first so its values win over a generic .env
load_dotenv(os.getenv("APP_ENV_FILE", "app.env"))
load_dotenv()

DSN_KEY = "DB_DSN"
SERVICE_PORT_KEY = "SERVICE_PORT"
DEFAULT_SERVICE_PORT = "9090"


def normalize_dsn(dsn: str) -> str:
    """Point bare postgres URLs at the psycopg driver."""
    for prefix in ("postgres://", "postgresql://"):
        if dsn.startswith(prefix):
            return "postgresql+psycopg://" + dsn[len(prefix):]
    return dsn


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_dsn: str
    database_echo: bool = False

    # API
    service_host: str = "0.0.0.0"
    service_port: int = int(DEFAULT_SERVICE_PORT)

    # Runtime
    env: str = "development"
    log_level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment.

        Raises:
            ConfigurationError: If DB_DSN is missing or SERVICE_PORT is not a port number
        """
        dsn = os.getenv(DSN_KEY, "").strip()
        if not dsn:
            raise ConfigurationError(f"{DSN_KEY} not set in environment", DSN_KEY)

        raw_port = os.getenv(SERVICE_PORT_KEY, "").strip() or DEFAULT_SERVICE_PORT
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(
                f"{SERVICE_PORT_KEY} must be an integer, got {raw_port!r}",
                SERVICE_PORT_KEY,
            ) from None
        if not 0 < port < 65536:
            raise ConfigurationError(
                f"{SERVICE_PORT_KEY} must be between 1 and 65535, got {port}",
                SERVICE_PORT_KEY,
            )

        return cls(
            database_dsn=normalize_dsn(dsn),
            database_echo=os.getenv("DB_ECHO", "false").lower() == "true",
            service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            service_port=port,
            env=os.getenv("ENV", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "text"),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
