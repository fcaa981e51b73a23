"""Process entry point — ``python -m users_service``.

Invariants:
    - Invalid settings never reach the listener: logged, then exit status 1
    - The server listens on Settings.host:Settings.port

Design Decisions:
    - uvicorn.run over a hand-rolled loop: it already logs and exits when the port cannot be bound
"""

import logging
import sys

import uvicorn

from users_service.config import Settings, get_settings
from users_service.core.errors import ConfigurationError
from users_service.infrastructure.observability import setup_logging
from users_service.main import create_app

logger = logging.getLogger("users_service")


def check_settings(settings: Settings) -> None:
    if not settings.is_valid():
        raise ConfigurationError(
            f"Invalid configuration: port={settings.port} database={settings.database!r}",
        )


def run(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    setup_logging(settings.effective_log_level, settings.log_format)
    try:
        check_settings(settings)
    except ConfigurationError as e:
        logger.error(e.message, extra={"error_code": e.code})
        sys.exit(1)

    logger.info(
        f"Starting {settings.app_name} server on port {settings.port}",
        extra={"port": settings.port},
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
