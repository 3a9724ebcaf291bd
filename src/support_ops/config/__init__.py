"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="support-ops-api", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode (echo SQL)")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/payment_support_ops",
        description="Reporting database connection URL (async driver)"
    )
    db_pool_size: int = Field(default=10, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=0, description="Max overflow connections", ge=0)
    db_pool_timeout: float = Field(
        default=30.0,
        description="Seconds to wait for a pooled connection before timing out",
        gt=0
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # ========== Reporting ==========
    default_page_size: int = Field(default=25, description="Ticket list page size", ge=1)
    max_page_size: int = Field(default=100, description="Upper bound for pageSize", ge=1)
    default_window_days: int = Field(
        default=30,
        description="Trailing window applied to ticket listing without from/to",
        ge=1
    )
    top_errors_limit: int = Field(default=20, description="Rows returned by top errors", ge=1)
    latency_percentile: int = Field(
        default=95,
        description="Nearest-rank percentile reported by trend endpoints",
        ge=1,
        le=100
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

class TicketStatus(str):
    """Ticket statuses the reports aggregate on (stored upper-case)."""
    CLOSED = "CLOSED"


class LogLevel(str):
    """Service log levels."""
    ERROR = "ERROR"
