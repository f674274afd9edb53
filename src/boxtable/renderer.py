"""Line emission into an in-memory text buffer."""

from __future__ import annotations

import io
from collections.abc import Sequence

from .exceptions import StructureError
from .justify import justify
from .models import PADDING, HorizontalAlign, OverflowBehaviour


class LineWriter:
    """
    Writes border and content lines, each terminated by ``line_separator``.

    Every column occupies ``width + 2 * PADDING`` characters, so horizontal
    lines and content lines built from the same widths always line up.
    """

    def __init__(self, line_separator: str = "\n") -> None:
        self._buffer = io.StringIO()
        self._line_separator = line_separator

    def horizontal_line(
        self,
        left: str | None,
        fill: str | None,
        separator: str | None,
        right: str | None,
        widths: Sequence[int],
    ) -> None:
        """Write a border line; ``None`` glyphs are omitted and a ``None`` fill draws spaces."""
        fill = fill if fill is not None else " "
        segments = [fill * (width + 2 * PADDING) for width in widths]
        self._write_line(left, separator, right, segments)

    def row(
        self,
        left: str | None,
        separator: str | None,
        right: str | None,
        values: Sequence[str],
        aligns: Sequence[HorizontalAlign],
        widths: Sequence[int],
        overflow: OverflowBehaviour,
    ) -> None:
        """
        Write a content line with each value justified into its column.

        Raises:
            StructureError: If values, aligns and widths differ in length
        """
        if not len(values) == len(aligns) == len(widths):
            raise StructureError(
                f"Row has {len(values)} fields but {len(widths)} columns "
                f"and {len(aligns)} alignments"
            )
        segments = [
            justify(value, align, width, PADDING, overflow)
            for value, align, width in zip(values, aligns, widths)
        ]
        self._write_line(left, separator, right, segments)

    def title_line(
        self,
        text: str,
        left: str | None,
        right: str | None,
        width: int,
        overflow: OverflowBehaviour,
    ) -> None:
        """Write a title centered across the full table width."""
        self._write_line(
            left, None, right, [justify(text, HorizontalAlign.CENTER, width, PADDING, overflow)]
        )

    def _write_line(
        self,
        left: str | None,
        separator: str | None,
        right: str | None,
        segments: Sequence[str],
    ) -> None:
        write = self._buffer.write
        if left is not None:
            write(left)
        write((separator or "").join(segments))
        if right is not None:
            write(right)
        write(self._line_separator)

    def getvalue(self) -> str:
        return self._buffer.getvalue()
