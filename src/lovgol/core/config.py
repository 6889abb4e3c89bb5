"""Environment-driven settings.

Every key maps to an upper-case environment variable (``DATABASE_URL``,
``SESSION_TTL_SECONDS`` ...) and may also come from a local ``.env`` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AppEnv = Literal["development", "testing", "production"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "LOVGOL"
    app_env: AppEnv = "development"
    debug: bool = False
    enable_openapi: bool = True
    # Applied only when the docs UI is disabled; it needs inline assets.
    csp_production: str = "default-src 'self'; frame-ancestors 'none'"
    cors_origins: list[str] = ["http://localhost:5173"]

    database_url: str
    database_pool_size: int = Field(default=5, ge=1)
    database_max_overflow: int = Field(default=10, ge=0)
    database_ssl_mode: Literal["disable", "prefer", "require", "verify-ca", "verify-full"] = (
        "prefer"
    )
    database_statement_cache_size: int = 100

    redis_url: str | None = None
    redis_pool_size: int = Field(default=10, ge=1)

    session_cookie_name: str = "lovgol_session"
    session_ttl_seconds: int = Field(default=24 * 60 * 60, gt=0)
    session_cookie_secure: bool = False
    argon2_time_cost: int = Field(default=3, ge=1)
    argon2_memory_cost: int = Field(default=64 * 1024, ge=8)
    argon2_parallelism: int = Field(default=1, ge=1)

    # Without a key, progress emails are logged instead of sent.
    resend_api_key: str | None = None
    email_from: str = "LOVGOL <updates@lovgol.com>"
    email_send_timeout_seconds: int = Field(default=10, gt=0)

    metrics_api_key: str | None = None
    shutdown_grace_period: int = Field(default=30, ge=0)

    @field_validator("cors_origins")
    @classmethod
    def reject_wildcard_origin(cls, v: list[str]) -> list[str]:
        # Session cookies are sent cross-origin, so every origin must be explicit.
        if "*" in v:
            raise ValueError("CORS_ORIGINS cannot contain '*' while credentials are allowed")
        return v

    @field_validator("redis_url", "resend_api_key", "metrics_api_key")
    @classmethod
    def empty_as_unset(cls, v: str | None) -> str | None:
        return v or None

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
