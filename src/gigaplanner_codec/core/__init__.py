"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        GigaPlannerError: Base exception for all codec errors.
        ConfigurationError: Settings-related errors.
        CatalogError: Catalog data errors.
        BuildCodeError: Build code encode/decode errors.
        MalformedBuildCodeError: Unparseable build codes and URLs.
        UnknownConfigurationError: Unresolvable perk list or game mechanics.
        TransformationError: Build-state transformation errors.

    Configuration:
        CodecSettings: Application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from gigaplanner_codec.core.config import (
    DEFAULT_BASE_URL,
    CodecSettings,
    clear_settings_cache,
    get_settings,
)
from gigaplanner_codec.core.exceptions import (
    BuildCodeError,
    CatalogError,
    ConfigurationError,
    GigaPlannerError,
    MalformedBuildCodeError,
    TransformationError,
    UnknownConfigurationError,
)
from gigaplanner_codec.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "GigaPlannerError",
    "ConfigurationError",
    "CatalogError",
    "BuildCodeError",
    "MalformedBuildCodeError",
    "UnknownConfigurationError",
    "TransformationError",
    # Configuration
    "DEFAULT_BASE_URL",
    "CodecSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
