"""Boundary Protocol — the capability set the HTTP layer needs from a user store.

Invariants:
    - Routes depend on UserService, never on a concrete implementation
    - Missing ids surface as ResourceNotFoundError (core/errors.py), never None

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync methods: the only implementation is in-memory, no IO to await
"""

from typing import Protocol

from users_service.core.user import User


class UserService(Protocol):
    """Contract for user operations — implemented by infrastructure/."""
    def list_users(self) -> list[User]: ...
    def get_user(self, user_id: int) -> User: ...
    def create_user(self, user: User) -> User: ...
    def update_user(self, user: User) -> User: ...
    def delete_user(self, user_id: int) -> None: ...
