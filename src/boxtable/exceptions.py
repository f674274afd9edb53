"""Exceptions for boxtable."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class BoxTableError(Exception):
    """
    Base exception for all boxtable errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(BoxTableError):
    """
    Raised when a table, column or border style is configured with an invalid value.

    Attributes:
        field: Name of the offending option (e.g., "width", "characters")
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


# ---------------------------------------------------------------------------
# Structure Exceptions
# ---------------------------------------------------------------------------


class StructureError(BoxTableError):
    """
    Raised when the table's shape cannot be rendered.

    This includes tables without columns, columns with differing cell
    counts and rows whose field count does not match the column count.
    """

    pass


class UnknownColumnError(StructureError):
    """Raised when a column is looked up by a header that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Column {name} does not exist")


# ---------------------------------------------------------------------------
# Output Exceptions
# ---------------------------------------------------------------------------


class OutputError(BoxTableError):
    """
    Raised when writing a rendered table to its output stream fails.

    Attributes:
        cause: The underlying exception raised by the stream
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
