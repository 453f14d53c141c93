"""Library configuration using Pydantic Settings v2"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings with environment variable support (``SCOPEFILTERS_`` prefix)"""

    model_config = SettingsConfigDict(
        env_prefix="SCOPEFILTERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    database_url: str = Field(default="sqlite+pysqlite:///:memory:")
    database_echo: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @property
    def is_memory_database(self) -> bool:
        """Check if using an in-memory SQLite database"""
        return is_memory_url(self.database_url)


def is_memory_url(url: str) -> bool:
    """Return True for SQLite URLs that point at a private in-memory database."""
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith("sqlite:"))


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic root handler using the configured level and format.

    The library itself never installs handlers; scripts and applications
    call this once at startup.
    """
    logging.basicConfig(
        level=level if level is not None else settings.log_level.upper(),
        format=settings.log_format,
    )


# Create global settings instance
settings = Settings()
