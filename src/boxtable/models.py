"""Core enums and constants for boxtable."""

from enum import Enum

from .exceptions import ConfigurationError

PADDING = 1
"""Spaces between a cell's content and the column separators on each side."""

ELLIPSIS = "…"
"""Glyph marking clipped content and rows dropped by a row limit."""

NULL_CELL = "null"
"""Text stored for a ``None`` cell value."""


class HorizontalAlign(Enum):
    """Horizontal alignment of text inside a column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def from_string(cls, align: str) -> "HorizontalAlign":
        """
        Parse an alignment name, ignoring case.

        Raises:
            ConfigurationError: If the name is not left, center or right
        """
        try:
            return cls(align.strip().lower())
        except (AttributeError, ValueError):
            raise ConfigurationError(
                "alignment", align, "expected one of left, center, right"
            ) from None


class OverflowBehaviour(Enum):
    """
    How content wider than its column is clipped.

    CLIP_RIGHT keeps the start: "Hello World" -> "Hello…"
    CLIP_LEFT keeps the end: "Hello World" -> "…World"
    """

    CLIP_RIGHT = "clip-right"
    CLIP_LEFT = "clip-left"

    @classmethod
    def from_string(cls, behaviour: str) -> "OverflowBehaviour":
        """
        Parse an overflow name such as ``"clip-left"`` or ``"CLIP_LEFT"``.

        Raises:
            ConfigurationError: If the name is not a known behaviour
        """
        try:
            return cls(behaviour.strip().lower().replace("_", "-"))
        except (AttributeError, ValueError):
            raise ConfigurationError(
                "overflow", behaviour, "expected one of clip-right, clip-left"
            ) from None


def coerce_align(align: "HorizontalAlign | str") -> HorizontalAlign:
    """Accept either an alignment member or its name."""
    if isinstance(align, HorizontalAlign):
        return align
    return HorizontalAlign.from_string(align)


def coerce_overflow(behaviour: "OverflowBehaviour | str") -> OverflowBehaviour:
    """Accept either an overflow member or its name."""
    if isinstance(behaviour, OverflowBehaviour):
        return behaviour
    return OverflowBehaviour.from_string(behaviour)
