"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings valid iff port > 0 and database is non-empty (is_valid)
    - create_default() ignores the environment: fixed defaults only
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Settings object passed to create_app() explicitly: no module-level mutable config
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 8080
DEFAULT_DATABASE = "postgres://localhost/app"
APP_NAME = "users-service"


class Settings(BaseSettings):
    """Application settings from environment variables (USERS_ prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="USERS_", case_sensitive=False, extra="ignore",
    )

    port: int = DEFAULT_PORT
    database: str = DEFAULT_DATABASE
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    app_name: str = APP_NAME

    # API
    cors_origins: list[str] = ["*"]
    # ADR: off by default — a malformed POST body is a client error, not a zero-valued user
    lenient_decoding: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @classmethod
    def create_default(cls) -> "Settings":
        """Settings with the built-in defaults, bypassing env and .env."""
        return cls.model_construct()

    def is_valid(self) -> bool:
        return self.port > 0 and bool(self.database)

    @property
    def listen_address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def create_default() -> Settings:
    return Settings.create_default()


@lru_cache
def get_settings() -> Settings:
    return Settings()
