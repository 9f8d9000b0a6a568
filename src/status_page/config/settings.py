"""Centralized configuration using pydantic-settings.

All configuration values are loaded from environment variables prefixed with
``STATUS_PAGE_``. Variables can be set in a .env file or directly in the
environment.

Usage:
    from status_page.config import get_settings
    settings = get_settings()
    print(settings.redis_url)
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STATUS_PAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # ==========================================================================
    # Probe targets
    # ==========================================================================
    database_url: str = Field(
        default="sqlite:///:memory:",
        description="SQLAlchemy database URL probed by the database provider"
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis URL probed by the redis provider"
    )
    redis_key: str = Field(
        default="status-page",
        description="Key written and read back by the redis provider"
    )
    celery_broker_url: str = Field(
        default="redis://localhost:6379/0",
        description="Broker URL used to ping Celery workers"
    )

    # ==========================================================================
    # Monitor
    # ==========================================================================
    providers: List[str] = Field(
        default_factory=list,
        description="Provider keys enabled by Monitor.from_settings"
    )
    probe_timeout: Optional[float] = Field(
        default=None,
        description="Seconds a single probe may run before it is reported as failed"
    )

    # ==========================================================================
    # Transport
    # ==========================================================================
    basic_auth_username: Optional[str] = Field(
        default=None,
        description="Username guarding the status endpoint"
    )
    basic_auth_password: Optional[str] = Field(
        default=None,
        description="Password guarding the status endpoint"
    )

    # ==========================================================================
    # Notifications
    # ==========================================================================
    webhook_url: Optional[str] = Field(
        default=None,
        description="Webhook URL that receives probe failure alerts"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_to_file: bool = Field(
        default=False,
        description="Whether to write logs to file"
    )
    logs_dir: Path = Field(
        default_factory=lambda: _get_project_root() / "logs",
        description="Directory for log files"
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("probe_timeout")
    @classmethod
    def validate_probe_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("probe_timeout must be greater than 0")
        return v

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @property
    def basic_auth_credentials(self) -> Optional[dict]:
        """Username/password pair, or None when no username is set."""
        if not self.basic_auth_username:
            return None
        return {
            "username": self.basic_auth_username,
            "password": self.basic_auth_password,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached for performance.
    Call get_settings.cache_clear() to reload.
    """
    return Settings()
