"""
Configuration management for the secondary glazing service.
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables (GLAZING_*) or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GLAZING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API server
    api_title: str = Field(default="Secondary Glazing Designer")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False, description="Restart the server when sources change")
    cors_origins: list[str] = Field(default=["*"])

    log_level: str = Field(default="INFO")

    # Design behaviour
    auto_apply_resolution: bool = Field(
        default=False,
        description="Write the resolved opening width into casement_width before reporting",
    )


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for the service."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )


# Global settings instance
settings = Settings()
