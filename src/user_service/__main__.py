"""Process entry point: python -m user_service"""

import logging
import sys

import uvicorn

from user_service.api.app import create_app
from user_service.config import get_settings
from user_service.errors import ConfigurationError
from user_service.observability import setup_logging

logger = logging.getLogger("user_service")


def main() -> int:
    try:
        settings = get_settings()
    except ConfigurationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}", extra={"error_code": e.code})
        return 1

    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting user service on port {settings.service_port} ({settings.env})")
    uvicorn.run(
        create_app(settings=settings),
        host=settings.service_host,
        port=settings.service_port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
