"""Sample User Service — in-memory UserService seeded with two fixed users.

Invariants:
    - A fresh instance always holds exactly users 1 (John Doe) and 2 (Jane Smith)
    - Instances share nothing: mutations never leak into another instance
    - update_user() assigns email through User.set_email (empty email rejected)

Design Decisions:
    - One instance per request (api/dependencies.py): no persistence, no locks needed
"""

import logging
from dataclasses import replace

from users_service.core.errors import ErrorContext, ResourceNotFoundError
from users_service.core.user import User

logger = logging.getLogger(__name__)


def sample_users() -> list[User]:
    """Build the fixed sample records. New objects on every call."""
    return [
        User(id=1, name="John Doe", email="john@example.com"),
        User(id=2, name="Jane Smith", email="jane@example.com"),
    ]


class SampleUserService:
    """UserService over a private dict keyed by user id."""

    def __init__(self, users: list[User] | None = None):
        seed = sample_users() if users is None else users
        self._users: dict[int, User] = {u.id: replace(u) for u in seed}

    def list_users(self) -> list[User]:
        return [self._users[uid] for uid in sorted(self._users)]

    def get_user(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
        return user

    def create_user(self, user: User) -> User:
        # ids are client-supplied; a repeated id replaces the earlier record
        self._users[user.id] = user
        logger.debug("User created", extra={"user_id": user.id})
        return user

    def update_user(self, user: User) -> User:
        current = self.get_user(user.id)
        updated = replace(current, name=user.name)
        updated.set_email(user.email)
        self._users[user.id] = updated
        return updated

    def delete_user(self, user_id: int) -> None:
        self.get_user(user_id)
        del self._users[user_id]
