"""Error Handlers — map every failure reaching the HTTP layer to one response shape.

Invariants:
    - UsersServiceError → its own envelope and http_status (core/errors.py)
    - RequestValidationError (path params, POST bodies) → 400 with per-field details
    - 405 on /users, for any method the router has no route for → text/plain
      "Method not allowed" with Allow: GET, POST
    - Other HTTP errors (404, 405 elsewhere) keep FastAPI's default rendering
    - Anything else → 500 INTERNAL_ERROR, no internals leaked

Design Decisions:
    - 405 rendered here rather than by a catch-all route: a route needs a method
      list, the router's 405 covers HEAD, TRACE and unknown methods too
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_service.api.routes import users
from users_service.core.errors import ErrorCategory, ErrorSeverity, UsersServiceError

logger = logging.getLogger(__name__)

# path → methods it answers; 405s there are rendered as plain text
PLAIN_TEXT_405 = {users.router.prefix: users.ALLOWED_METHODS}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsersServiceError)
    async def domain_error_handler(request: Request, exc: UsersServiceError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{exc.code}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "user_id": exc.context.user_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {len(exc.errors())} error(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        allowed = PLAIN_TEXT_405.get(request.url.path)
        if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or allowed is None:
            return await http_exception_handler(request, exc)
        logger.warning(
            "Method not allowed",
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "Method not allowed",
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": ", ".join(allowed)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc}",
            extra={"method": request.method, "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Field paths joined with dots, e.g. ``body.id`` or ``path.user_id``."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
