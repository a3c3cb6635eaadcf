"""
Application configuration settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"], case_sensitive=False, extra="ignore"
    )

    # Application
    app_name: str = Field("Image Flashcards", alias="APP_NAME")
    environment: str = Field("development", alias="ENVIRONMENT")

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./flashcards.db", alias="DATABASE_URL"
    )
    debug_sql: bool = Field(False, alias="DATABASE_ECHO")

    # Image codec
    image_max_side: int = Field(1280, alias="IMAGE_MAX_SIDE", ge=1)
    image_quality: float = Field(0.82, alias="IMAGE_QUALITY", gt=0, le=1)

    # Review
    review_default_count: int = Field(10, alias="REVIEW_DEFAULT_COUNT", ge=1)

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")


_settings = None


def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
