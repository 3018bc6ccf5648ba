"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Cross-field rules (storage backend, auth delay range)
are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    DEFAULT_SESSION_KEY,
    DEFAULT_TASK_COLLECTION_KEY,
    STORAGE_BACKENDS,
)


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults suitable for a local, single-user install.
    """

    # App
    app_name: str = "flowtask"
    app_version: str = "1.0.0"
    debug: bool = False

    # Storage: "file" (JSON files under storage_root), "memory", or "redis"
    storage_backend: str = "file"
    storage_root: str = "~/.flowtask"
    task_collection_key: str = DEFAULT_TASK_COLLECTION_KEY
    session_key: str = DEFAULT_SESSION_KEY

    # Redis (storage_backend == "redis")
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    redis_key_prefix: str = "flowtask:"

    # Mock Google sign-in: simulated network latency (seconds) and demo identity
    auth_delay_min_seconds: float = 1.0
    auth_delay_max_seconds: float = 2.0
    demo_user_email: str = "demo@flowtask.app"
    demo_user_name: str = "Demo User"
    demo_user_photo_url: str | None = (
        "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
        "?w=150&h=150&fit=crop&crop=face"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage_and_auth(self) -> "Settings":
        """Validate storage backend and the simulated auth delay range."""
        backend = self.storage_backend.lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                f"Must be one of: {', '.join(repr(b) for b in STORAGE_BACKENDS)}"
            )
        self.storage_backend = backend
        if backend == "file" and not self.storage_root:
            raise ValueError("STORAGE_ROOT is required when storage_backend is 'file'.")
        if self.auth_delay_min_seconds < 0 or self.auth_delay_max_seconds < 0:
            raise ValueError("Auth delay bounds must not be negative.")
        if self.auth_delay_min_seconds > self.auth_delay_max_seconds:
            raise ValueError(
                "AUTH_DELAY_MIN_SECONDS must not exceed AUTH_DELAY_MAX_SECONDS."
            )
        if not self.task_collection_key or not self.session_key:
            raise ValueError("Storage keys must not be empty.")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
