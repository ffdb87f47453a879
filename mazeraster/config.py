"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    log_level: str = "info"

    # Default render parameters
    wall: int = 40
    passage: int = 40
    margin: int = 50
    background: str = "#fafafa"
    foreground: str = "#000000"

    model_config = SettingsConfigDict(
        env_prefix="MAZERASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler. Call from applications, never at import."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
