"""Configuration management for Latchkey.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded once at
application startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from latchkey.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LATCHKEY_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application Settings
    app_name: str = "Latchkey"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./lk_data/latchkey.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_echo: bool = False
    db_operation_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound in seconds for a single account store call",
    )

    # Security Settings
    secret_key: str | None = Field(
        default=None,
        description="Secret key for session token signing (required)",
    )
    token_lifetime_seconds: int = Field(
        default=86400,
        gt=0,
        description="Session token lifetime, shared by the token and its cookie",
    )
    hash_time_cost: int = Field(default=3, ge=1, description="Argon2 iterations")
    hash_memory_cost: int = Field(default=65536, ge=8, description="Argon2 memory in KiB")
    hash_parallelism: int = Field(default=4, ge=1, description="Argon2 lanes")
    cookie_name: str = "token"

    # CORS Settings
    cors_origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:5173"])
    cors_allow_credentials: bool = True

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("secret_key")
    @classmethod
    def blank_secret_is_missing(cls, v: str | None) -> str | None:
        """Treat an empty or whitespace-only secret as not configured."""
        if v is not None and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1."
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"

    def require_secret(self) -> str:
        """Return the signing secret.

        Raises:
            ConfigurationError: If no secret key is configured.
        """
        if self.secret_key is None:
            raise ConfigurationError(
                "LATCHKEY_SECRET_KEY must be set before the service can start"
            )
        return self.secret_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once per process. Components receive the instance
    explicitly from the application factory rather than calling this
    themselves.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
