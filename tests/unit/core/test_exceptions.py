"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from gigaplanner_codec.core.exceptions import (
    BuildCodeError,
    CatalogError,
    ConfigurationError,
    GigaPlannerError,
    MalformedBuildCodeError,
    TransformationError,
    UnknownConfigurationError,
)


class TestGigaPlannerError:
    """Tests for the base GigaPlannerError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = GigaPlannerError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = GigaPlannerError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(GigaPlannerError("Test", details={"x": 1}))
        assert "GigaPlannerError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestCatalogExceptions:
    """Tests for configuration and catalog exceptions."""

    def test_configuration_error_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad URL", config_key="base_url")
        assert exc.details["config_key"] == "base_url"

    def test_catalog_error_context(self) -> None:
        """Test CatalogError with catalog and entry."""
        exc = CatalogError("Duplicate", catalog="races", entry="Nord", details={"ids": [0, 2]})
        assert exc.details == {"ids": [0, 2], "catalog": "races", "entry": "Nord"}


class TestCodecExceptions:
    """Tests for build code exceptions."""

    def test_malformed_build_code(self) -> None:
        """Test MalformedBuildCodeError keeps the offending code."""
        exc = MalformedBuildCodeError("Invalid base64", build_code="Ag$A")
        assert exc.details["build_code"] == "Ag$A"
        assert exc.message == "Invalid base64"

    def test_unknown_configuration_zero_value(self) -> None:
        """Test that an id of 0 is still recorded."""
        exc = UnknownConfigurationError("Invalid perk list ID: 0", field_name="perk_list_id", value=0)
        assert exc.details == {"field_name": "perk_list_id", "value": 0}

    @pytest.mark.parametrize(
        "exc_class,parent",
        [
            (MalformedBuildCodeError, BuildCodeError),
            (UnknownConfigurationError, BuildCodeError),
            (BuildCodeError, GigaPlannerError),
            (CatalogError, GigaPlannerError),
            (ConfigurationError, GigaPlannerError),
            (TransformationError, GigaPlannerError),
        ],
    )
    def test_inheritance(self, exc_class: type[Exception], parent: type[Exception]) -> None:
        """Test exception inheritance chain."""
        assert issubclass(exc_class, parent)
        assert issubclass(exc_class, Exception)
