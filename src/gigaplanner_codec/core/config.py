"""Configuration management for the GigaPlanner build codec.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files and runtime overrides.

Example:
    >>> from gigaplanner_codec.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.base_url)
    'https://gigaplanner.com'

Environment Variables:
    GIGAPLANNER_BASE_URL: Base URL used when building share links
    GIGAPLANNER_CATALOG_DIR: Directory containing the JSON catalog files
    GIGAPLANNER_DUPLICATE_NAMES: Duplicate catalog name policy (warn, error)
    GIGAPLANNER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    GIGAPLANNER_JSON_LOGS: Emit JSON log lines instead of console output
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gigaplanner_codec.core.exceptions import ConfigurationError


DEFAULT_BASE_URL = "https://gigaplanner.com"


class CodecSettings(BaseSettings):
    """Settings for the build codec and its command line front end.

    Attributes:
        debug: Force DEBUG logging regardless of log_level.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        base_url: Base URL prepended to encoded share links.
        catalog_dir: Directory holding the JSON catalog files.
        duplicate_names: What to do when a catalog repeats a name.
    """

    model_config = SettingsConfigDict(
        env_prefix="GIGAPLANNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Force DEBUG logging",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL for generated share links",
    )
    catalog_dir: Path | None = Field(
        default=None,
        description="Directory containing races.json, perks.json, etc.",
    )
    duplicate_names: Literal["warn", "error"] = Field(
        default="warn",
        description="Policy for duplicate names inside one catalog",
    )

    @field_validator("base_url", mode="after")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Ensure the base URL is an absolute http(s) URL.

        Args:
            value: The configured base URL.

        Returns:
            The validated URL.

        Raises:
            ConfigurationError: If the URL is not http or https.
        """
        if not value.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must start with http:// or https://, got {value!r}",
                config_key="base_url",
            )
        return value

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug switch."""
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> CodecSettings:
    """Get the application settings singleton.

    Returns:
        The cached CodecSettings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return CodecSettings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()
