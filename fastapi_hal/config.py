"""Settings for HAL response assembly."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class HalSettings(BaseSettings):
    """
    HAL settings managed by Pydantic.
    Reads HAL_* environment variables and/or a .env file.
    """

    media_type: str = "application/hal+json"
    log_level: str = "WARNING"
    # Expose exception messages in error documents built by HalErrorMiddleware
    error_detail: bool = False

    model_config = SettingsConfigDict(
        env_prefix="HAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> HalSettings:
    """Return the process-wide settings, loaded on first use."""
    return HalSettings()
