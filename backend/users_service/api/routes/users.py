"""Users Resource — list, create and fetch users over the injected UserService.

Invariants:
    - GET /users returns the service's users as a JSON array
    - POST /users answers text/plain "Created user: <name>"
    - Any other method on /users answers 405 text/plain "Method not allowed"
    - Nothing written by a request is visible to the next one

Design Decisions:
    - POST body decoded by hand (schemas.user.decode_user) so lenient_decoding
      can reproduce the zero-valued fallback instead of FastAPI's automatic 400
    - No catch-all route for other methods: the router raises 405 for them and
      api/error_handlers.py renders it as plain text with ALLOWED_METHODS
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from users_service.api.dependencies import get_app_settings, get_user_service
from users_service.config import Settings
from users_service.core.user_service import UserService
from users_service.schemas.user import UserResponse, decode_user

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])

ALLOWED_METHODS = ("GET", "POST")


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """Return every user known to the service."""
    return [UserResponse.from_domain(u) for u in service.list_users()]


@router.post("", response_class=PlainTextResponse)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_app_settings),
):
    """Decode a user from the body and acknowledge it by name."""
    user = decode_user(await request.body(), lenient=settings.lenient_decoding)
    service.create_user(user)
    logger.info(f"Created user: {user.name}", extra={"user_id": user.id})
    return PlainTextResponse(f"Created user: {user.name}")


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Fetch one user. Unknown ids raise ResourceNotFoundError (404)."""
    return UserResponse.from_domain(service.get_user(user_id))
