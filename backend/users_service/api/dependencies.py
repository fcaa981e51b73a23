"""Route Dependencies — per-request access to app settings and the UserService.

Invariants:
    - Settings come from app.state (set once by create_app), never from a global
    - get_user_service() builds a fresh SampleUserService per request

Design Decisions:
    - FastAPI Depends over module singletons: tests swap implementations via dependency_overrides
"""

from fastapi import Request

from users_service.config import Settings
from users_service.core.user_service import UserService
from users_service.infrastructure.sample_users import SampleUserService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service() -> UserService:
    return SampleUserService()
