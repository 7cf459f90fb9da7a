"""
Scatter-Brain Backend — Application Configuration
==================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, middleware, and the server entry point.
When:  Loaded once at module import time.

Environment:
    PORT          Listening port (default 9999)
    HOST          Bind address (default 0.0.0.0)
    LOG_LEVEL     DEBUG / INFO / WARNING / ERROR / CRITICAL (default INFO)
    STATIC_ROOT   Directory served for every non-API path (default ./public)
    CORS_ORIGINS  Comma-separated allowed origins (default *)
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running locally with no
    environment at all; `PORT` is the only one most deployments change.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=9999, ge=1, le=65535, description="Listening port")

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Static Front End ──────────────────────────────────────────────────
    # Served for every path the API router does not claim.
    static_root: str = Field(default="public")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # PORT and port both work
        extra="ignore",
    )


# Singleton instance, imported throughout the application
settings = Settings()
