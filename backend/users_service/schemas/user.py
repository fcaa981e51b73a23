"""User Schemas — wire shape of the users resource.

Invariants:
    - Missing fields decode to zero values (0, "") — no required fields
    - Unknown fields are ignored
    - decode_user() is the single place a request body becomes a domain User

Design Decisions:
    - Schemas separate from core.user.User: wire contract vs domain object
    - No format rules on email: only emptiness is checked, and only by User.set_email
"""

import logging

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, ValidationError

from users_service.core.user import User

logger = logging.getLogger(__name__)


class UserPayload(BaseModel):
    """Request body for POST /users."""
    model_config = ConfigDict(extra="ignore")

    id: int = 0
    name: str = ""
    email: str = ""

    def to_domain(self) -> User:
        return User(id=self.id, name=self.name, email=self.email)


class UserResponse(BaseModel):
    """Public-facing user record."""
    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, email=user.email)


def decode_user(raw: bytes, lenient: bool = False) -> User:
    """Decode a request body into a User.

    Malformed JSON or mistyped fields raise RequestValidationError, unless
    ``lenient`` is set, in which case a zero-valued User is returned.
    """
    try:
        return UserPayload.model_validate_json(raw or b"{}").to_domain()
    except ValidationError as e:
        if lenient:
            logger.warning(f"Discarding malformed user payload: {e.error_count()} error(s)")
            return User()
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)],
        ) from e
