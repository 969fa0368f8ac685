"""
Centralized configuration management using pydantic-settings.
This module provides a single source of truth for all application configuration.
"""

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskboard.utils.logger import setup_logger

load_dotenv(override=False)


logger = setup_logger("core_config")

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./taskboard.db"


class Settings(BaseSettings):
    """
    Application settings managed by pydantic-settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        env_prefix="",
    )

    # ===== Database Configuration =====
    database_url: str = Field(
        default=DEFAULT_DATABASE_URL,
        alias="DATABASE_URL",
        description="SQLAlchemy async database URL (postgresql+asyncpg or sqlite+aiosqlite)",
    )

    db_echo: bool = Field(
        default=False,
        alias="DB_ECHO",
        description="Echo every SQL statement to the log",
    )

    # ===== Server Configuration =====
    server_host: str = Field(
        default="0.0.0.0",
        alias="SERVER_HOST",
        description="Host interface for the HTTP server",
    )

    server_port: int = Field(
        default=5000,
        alias="PORT",
        description="Port for the HTTP server",
    )

    # ===== Feature flags =====
    admin_enabled: bool = Field(
        default=True,
        alias="ADMIN_ENABLED",
        description="Mount the admin sign-in and admin task routes",
    )

    metrics_enabled: bool = Field(
        default=True,
        alias="METRICS_ENABLED",
        description="Expose /metrics and record per-request counters",
    )

    # ===== CORS Configuration =====
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["https://activity-app11.netlify.app"],
        alias="CORS_ALLOW_ORIGINS",
        description="CORS allowed origins",
    )

    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
        description="CORS allowed methods",
    )

    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["Content-Type"],
        alias="CORS_ALLOW_HEADERS",
        description="CORS allowed headers",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Log warnings for configuration that is unsuitable for production."""
        if self.database_url == DEFAULT_DATABASE_URL:
            logger.warning(
                "DATABASE_URL environment variable not set, using local SQLite file."
            )

        logger.debug(
            f"Admin routes enabled: {self.admin_enabled}, metrics enabled: {self.metrics_enabled}"
        )
        return self


# Global settings instance
settings = Settings()
