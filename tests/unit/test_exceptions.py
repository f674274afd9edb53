"""Tests for exception classes."""

import pytest

from boxtable.exceptions import (
    BoxTableError,
    ConfigurationError,
    OutputError,
    StructureError,
    UnknownColumnError,
)


class TestHierarchy:
    """All library errors share one base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("width", -1, "width must be non-negative"),
            StructureError("No columns added"),
            UnknownColumnError("age"),
            OutputError("Failed to write"),
        ],
    )
    def test_base_class(self, error: BoxTableError) -> None:
        assert isinstance(error, BoxTableError)

    def test_unknown_column_is_structural(self) -> None:
        assert issubclass(UnknownColumnError, StructureError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_attributes_and_message(self) -> None:
        error = ConfigurationError("width", -1, "width must be non-negative")
        assert error.field == "width"
        assert error.value == -1
        assert error.reason == "width must be non-negative"
        assert str(error) == "Invalid width -1: width must be non-negative"


class TestUnknownColumnError:
    """Tests for UnknownColumnError."""

    def test_message(self) -> None:
        error = UnknownColumnError("age")
        assert error.name == "age"
        assert str(error) == "Column age does not exist"


class TestOutputError:
    """Tests for OutputError."""

    def test_without_cause(self) -> None:
        error = OutputError("Failed to write")
        assert error.cause is None
        assert str(error) == "Failed to write"

    def test_with_cause(self) -> None:
        cause = OSError("broken pipe")
        error = OutputError("Failed to write", cause)
        assert error.cause is cause
        assert str(error) == "Failed to write: broken pipe"
