"""Custom exception hierarchy for the GigaPlanner build codec.

This module defines the exceptions raised across the codec. All of them
inherit from GigaPlannerError so the UI-facing boundary (``decode_url``)
can turn any codec failure into a reportable message while lower-level
callers keep the specific failure type.

Example:
    >>> from gigaplanner_codec.core.exceptions import UnknownConfigurationError
    >>> raise UnknownConfigurationError("Invalid perk list ID: 9", field_name="perk_list_id")
"""

from __future__ import annotations

from typing import Any


class GigaPlannerError(Exception):
    """Base exception for all GigaPlanner codec errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Catalog Exceptions
# =============================================================================


class ConfigurationError(GigaPlannerError):
    """Raised when application settings are invalid or cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class CatalogError(GigaPlannerError):
    """Raised when catalog reference data is missing, malformed or ambiguous.

    This covers unreadable catalog files, schema violations and, under the
    strict duplicate policy, two entries sharing one name.
    """

    def __init__(
        self,
        message: str,
        *,
        catalog: str | None = None,
        entry: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog error with catalog context.

        Args:
            message: Human-readable error description.
            catalog: Name of the catalog involved (e.g. ``races``).
            entry: The offending entry name, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if catalog:
            combined_details["catalog"] = catalog
        if entry:
            combined_details["entry"] = entry
        super().__init__(message, details=combined_details)


# =============================================================================
# Codec Exceptions
# =============================================================================


class BuildCodeError(GigaPlannerError):
    """Base exception for build code encoding and decoding failures."""


class MalformedBuildCodeError(BuildCodeError):
    """Raised when a build code or share URL cannot be parsed.

    This covers a missing ``b`` parameter, invalid base64 and payloads
    too short to hold the fixed header.
    """

    def __init__(
        self,
        message: str,
        *,
        build_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize malformed build code error.

        Args:
            message: Human-readable error description.
            build_code: The offending build code, if available.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if build_code:
            combined_details["build_code"] = build_code
        super().__init__(message, details=combined_details)


class UnknownConfigurationError(BuildCodeError):
    """Raised when a perk list or game mechanics id/name cannot be resolved.

    Configuration ids decide the skill slot meaning and the perk bitmap
    layout, so failing to resolve one fails the whole operation.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration resolution error.

        Args:
            message: Human-readable error description.
            field_name: The configuration field that failed to resolve.
            value: The unresolved id or name.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if value is not None:
            combined_details["value"] = value
        super().__init__(message, details=combined_details)


# =============================================================================
# Transformation Exceptions
# =============================================================================


class TransformationError(GigaPlannerError):
    """Raised when a decoded character cannot be mapped to a build state."""


__all__ = [
    "GigaPlannerError",
    "ConfigurationError",
    "CatalogError",
    "BuildCodeError",
    "MalformedBuildCodeError",
    "UnknownConfigurationError",
    "TransformationError",
]
