"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (password_salt) come from environment variables in deployment
    - get_settings() is cached (lru_cache): single instance per process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Remote account server
    account_server_url: str = "http://localhost:8080"
    account_server_timeout_seconds: float = 10.0

    @field_validator("account_server_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined as /login etc., so the base must not end with '/'."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Password hardening
    password_salt: str = "accountgate-dev-salt"
    password_hash_iterations: int = 100_000

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
