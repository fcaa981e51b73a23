"""users-service API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings object handed to create_app() and stored on app.state; handlers read it, never mutate it
    - Global error handlers map UsersServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory plus module-level app: tests build apps from explicit
      Settings, uvicorn discovers users_service.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_service import __version__
from users_service.api.error_handlers import register_error_handlers
from users_service.api.routes import health, users
from users_service.config import Settings, get_settings
from users_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.effective_log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} API started on {settings.listen_address}",
        extra={"port": settings.port},
    )
    yield
    logger.info(f"{settings.app_name} API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around an explicit Settings object."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name, version=__version__,
        debug=settings.debug, lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
