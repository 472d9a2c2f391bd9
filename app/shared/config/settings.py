# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads settings from environment variables
# and provides them to the rest of the crop calendar in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for calendar, storage, notification and logging parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (composition root)
# - app.shared.utils.logging
# - Calendar services needing windows and timeouts

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Crop Calendar", description="Application name")
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # CALENDAR
    # =========================================================================

    CALENDAR_RECENCY_WINDOW_DAYS: int = Field(
        default=30,
        description="How many days past template activities stay visible"
    )
    CALENDAR_ROLL_OVER_YEAR: bool = Field(
        default=True,
        description="Roll templates into the neighbouring year around New Year"
    )
    CALENDAR_UPCOMING_WINDOW_DAYS: int = Field(
        default=7,
        description="Horizon for the upcoming events view"
    )
    CALENDAR_CATALOG_PATH: Optional[str] = Field(
        None,
        description="Override for the bundled crop schedule catalog"
    )
    CALENDAR_EVENTS_PATH: str = Field(
        default="data/calendar_events.json",
        description="File holding farmer-authored events"
    )

    # =========================================================================
    # COLLABORATOR TIMEOUTS
    # =========================================================================

    PERSISTENCE_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="Timeout for event storage reads and writes"
    )
    NOTIFICATION_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="Timeout for scheduling or cancelling a notification"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()

    @field_validator("CALENDAR_RECENCY_WINDOW_DAYS", "CALENDAR_UPCOMING_WINDOW_DAYS")
    @classmethod
    def validate_window(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Calendar windows must be positive")
        return v

    @field_validator("PERSISTENCE_TIMEOUT_SECONDS", "NOTIFICATION_TIMEOUT_SECONDS")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
