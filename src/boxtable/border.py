"""
Border styles.

A border style is a flat palette of at least 29 glyphs. Each index has a
fixed structural meaning, so a palette encodes the whole grid-drawing
vocabulary positionally:

    index   meaning
    0-3     top border: left, fill, column separator, right
    4-6     content line (title/header/data/footer): left, separator, right
    7-13    reserved
    14-17   data row separator: left, fill, separator, right
    18-21   header bottom border: left, fill, separator, right
    22-24   reserved
    25-28   bottom border: left, fill, separator, right

Title lines reuse these slots: the top border above a title has no column
divisions (fill glyph in the separator slot), title lines are separated by a
data row separator without divisions, and the border under the last title
takes its divisions from the top-border separator glyph (index 2).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import ConfigurationError

MIN_CHARACTERS = 29
"""Smallest palette that covers every structural position."""

# Palette positions used for each kind of line: (left, fill, separator, right)
TOP_BORDER = (0, 1, 2, 3)
TOP_BORDER_WITH_TITLE = (0, 1, 1, 3)
TITLE_ROW_SEPARATOR = (14, 15, 15, 17)
TITLE_BOTTOM_BORDER = (18, 19, 2, 21)
HEADER_BOTTOM_BORDER = (18, 19, 20, 21)
ROW_SEPARATOR = (14, 15, 16, 17)
BOTTOM_BORDER = (25, 26, 27, 28)

# Content lines: (left, separator, right)
CONTENT_LINE = (4, 5, 6)

FANCY_CHARACTERS = "╔═╤╗║│║╠═╪╣║│║╟─┼╢╠═╪╣║│║╚═╧╝"
BASIC_CHARACTERS = "+-++|||+-++|||+-+++-++|||+-++"


@dataclass(frozen=True)
class BorderStyle:
    """
    Immutable border glyph palette.

    Attributes:
        characters: Glyph per structural position; ``None`` omits that glyph
        show_row_boundaries: Draw a separator line between consecutive data rows
    """

    characters: tuple[str | None, ...]
    show_row_boundaries: bool = False

    def __post_init__(self) -> None:
        characters = tuple(self.characters)
        if len(characters) < MIN_CHARACTERS:
            raise ConfigurationError(
                "characters",
                "".join(c or " " for c in characters),
                f"a border style needs at least {MIN_CHARACTERS} characters, "
                f"got {len(characters)}",
            )
        for glyph in characters:
            if glyph is not None and (not isinstance(glyph, str) or len(glyph) != 1):
                raise ConfigurationError(
                    "characters", glyph, "each border glyph must be a single character or None"
                )
        object.__setattr__(self, "characters", characters)

    @classmethod
    def of(
        cls, characters: Sequence[str | None] | str, show_row_boundaries: bool = False
    ) -> BorderStyle:
        """Create a style from a string or any sequence of glyphs."""
        return cls(tuple(characters), show_row_boundaries)

    def glyphs(self, positions: tuple[int, ...]) -> tuple[str | None, ...]:
        """Look up the glyphs at the given palette positions."""
        return tuple(self.characters[index] for index in positions)

    def with_row_boundaries(self, enabled: bool = True) -> BorderStyle:
        """Return a copy of this style with row boundaries toggled."""
        return BorderStyle(self.characters, enabled)


FANCY = BorderStyle.of(FANCY_CHARACTERS, show_row_boundaries=False)
"""Double-line box drawing, no separators between data rows."""

FANCY2 = BorderStyle.of(FANCY_CHARACTERS, show_row_boundaries=True)
"""Double-line box drawing with separators between data rows."""

BASIC = BorderStyle.of(BASIC_CHARACTERS, show_row_boundaries=True)
"""ASCII ``+-|`` borders with separators between data rows."""

BASIC2 = BorderStyle.of(BASIC_CHARACTERS, show_row_boundaries=False)
"""ASCII ``+-|`` borders, no separators between data rows (the default)."""

PRESETS: dict[str, BorderStyle] = {
    "basic": BASIC,
    "basic2": BASIC2,
    "fancy": FANCY,
    "fancy2": FANCY2,
}
