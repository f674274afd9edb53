"""Display width measurement for terminal output.

Wide East Asian characters occupy two terminal columns, combining marks and
zero-width characters occupy none. Every sizing and padding decision in the
layout engine goes through :func:`display_width`.
"""

from __future__ import annotations

from wcwidth import wcwidth


def char_width(char: str) -> int:
    """Return the column width of a single character (control characters count 0)."""
    width = wcwidth(char)
    return width if width > 0 else 0


def display_width(text: str | None) -> int:
    """
    Return the number of terminal columns ``text`` occupies.

    Args:
        text: String to measure; ``None`` and ``""`` measure 0

    Returns:
        Sum of per-character widths
    """
    if not text:
        return 0
    return sum(char_width(char) for char in text)


def clip_end(text: str, max_width: int) -> str:
    """Return the longest prefix of ``text`` that fits in ``max_width`` columns."""
    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > max_width:
            return text[:index]
    return text


def clip_start(text: str, max_width: int) -> str:
    """Return the longest suffix of ``text`` that fits in ``max_width`` columns."""
    used = 0
    for index in range(len(text) - 1, -1, -1):
        used += char_width(text[index])
        if used > max_width:
            return text[index + 1 :]
    return text
