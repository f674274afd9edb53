"""Tables, their fluent builder and output helpers.

Example:
    table = Table.builder().title("staff").border_style(FANCY).build()
    table.add_header("name", "age")
    table.add_data([["John", "25"], ["Tom", "14"]])
    table.print()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .border import BASIC2, BorderStyle
from .column import CellValue, Column
from .config import DEFAULT_LINE_SEPARATOR
from .exceptions import ConfigurationError, OutputError, StructureError, UnknownColumnError
from .layout import render
from .models import OverflowBehaviour, coerce_overflow

logger = logging.getLogger(__name__)


def write_output(message: str, stream: TextIO) -> None:
    """
    Write ``message`` to ``stream`` and flush it.

    Raises:
        OutputError: If the stream raises an I/O error
    """
    try:
        stream.write(message)
        stream.flush()
    except OSError as e:
        raise OutputError("Failed to write table to output stream", e) from e


def _check_limit(limit: int | None) -> int | None:
    if limit is not None and limit < 0:
        raise ConfigurationError("limit", limit, "limit must be non-negative or None")
    return limit


class Table:
    """
    A renderable table: title lines, columns and presentation options.

    Rendering is side-effect free: row limits, row numbers and title width
    reconciliation are applied to a derived plan, never to the stored columns.
    """

    def __init__(
        self,
        columns: Iterable[Column] = (),
        title_lines: Iterable[str] = (),
        border_style: BorderStyle = BASIC2,
        limit: int | None = None,
        row_numbers: bool = False,
        overflow: OverflowBehaviour = OverflowBehaviour.CLIP_RIGHT,
    ) -> None:
        self._columns: list[Column] = list(columns)
        self._title_lines: list[str] = [line.upper() for line in title_lines]
        self.border_style = border_style
        self.limit = _check_limit(limit)
        self.row_numbers = row_numbers
        self.overflow = overflow

    @staticmethod
    def builder() -> TableBuilder:
        """Start a fluent table configuration."""
        return TableBuilder()

    @property
    def title_lines(self) -> tuple[str, ...]:
        return tuple(self._title_lines)

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_title_line(self, line: str) -> None:
        """Append a title line (stored upper-cased)."""
        if line is None:
            raise ConfigurationError("title", line, "title cannot be None")
        self._title_lines.append(line.upper())

    def add_header(self, *headers: str) -> None:
        """Append one default column per header name."""
        for header in headers:
            self._columns.append(Column.builder().header(header).build())

    def add_columns(self, *columns: Column) -> None:
        self._columns.extend(columns)

    def column(self, name: str) -> Column:
        """
        Find a column by header, ignoring case.

        Raises:
            UnknownColumnError: If no column has that header
        """
        wanted = name.upper()
        for column in self._columns:
            if column.header == wanted:
                return column
        raise UnknownColumnError(name)

    def add_cell(self, name: str, value: CellValue) -> None:
        """Append ``value`` to the column whose header matches ``name``."""
        self.column(name).add_cell(value)

    def add_data(self, rows: Iterable[Sequence[CellValue]]) -> None:
        """
        Append rows of values, one value per column.

        Every row is checked before any cell is added, so a bad row leaves
        the table unchanged.

        Raises:
            StructureError: If a row's length differs from the column count
        """
        rows = [list(row) for row in rows]
        for index, row in enumerate(rows):
            if len(row) != len(self._columns):
                raise StructureError(
                    f"Row {index} has {len(row)} values but the table has "
                    f"{len(self._columns)} columns"
                )
        for row in rows:
            for column, value in zip(self._columns, row):
                column.add_cell(value)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, line_separator: str = DEFAULT_LINE_SEPARATOR) -> str:
        """Render the table; see :func:`boxtable.layout.render`."""
        return render(self, line_separator)

    def print(
        self, stream: TextIO | None = None, line_separator: str = DEFAULT_LINE_SEPARATOR
    ) -> None:
        """
        Render the table and write it to ``stream`` (default: standard output).

        Raises:
            StructureError: If the table cannot be rendered
            OutputError: If writing to the stream fails
        """
        text = self.render(line_separator)
        logger.debug("Writing %d-character table", len(text))
        write_output(text, stream if stream is not None else sys.stdout)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Table(columns={len(self._columns)}, titles={len(self._title_lines)}, "
            f"limit={self.limit}, row_numbers={self.row_numbers})"
        )


class TableBuilder:
    """Fluent builder for :class:`Table`.

    All configuration methods return ``self`` for chaining. Defaults: no
    titles, no columns, ``BASIC2`` borders, unlimited rows, no row numbers,
    clip overflowing content on the right.
    """

    def __init__(self) -> None:
        self._title_lines: list[str] = []
        self._columns: list[Column] = []
        self._border_style = BASIC2
        self._limit: int | None = None
        self._row_numbers = False
        self._overflow = OverflowBehaviour.CLIP_RIGHT

    def title(self, line: str) -> TableBuilder:
        """Append a title line (rendered upper-cased)."""
        if line is None:
            raise ConfigurationError("title", line, "title cannot be None")
        self._title_lines.append(line.upper())
        return self

    def row_numbers(self, enabled: bool = True) -> TableBuilder:
        """Show a ``1..n`` column left of the data (default: off)."""
        self._row_numbers = enabled
        return self

    def border_style(self, style: BorderStyle) -> TableBuilder:
        """Set the border style (default: ``BASIC2``)."""
        self._border_style = style
        return self

    def border_characters(
        self, characters: Sequence[str | None] | str, show_row_boundaries: bool = False
    ) -> TableBuilder:
        """Use a custom palette of at least 29 glyphs."""
        self._border_style = BorderStyle.of(characters, show_row_boundaries)
        return self

    def limit(self, limit: int | None) -> TableBuilder:
        """Show at most ``limit`` data rows followed by an ellipsis row (None: unlimited)."""
        self._limit = _check_limit(limit)
        return self

    def overflow(self, behaviour: OverflowBehaviour | str) -> TableBuilder:
        """Set how content wider than its column is clipped (default: clip right)."""
        self._overflow = coerce_overflow(behaviour)
        return self

    def column(self, column: Column) -> TableBuilder:
        self._columns.append(column)
        return self

    def columns(self, *columns: Column) -> TableBuilder:
        self._columns.extend(columns)
        return self

    def build(self) -> Table:
        return Table(
            columns=self._columns,
            title_lines=self._title_lines,
            border_style=self._border_style,
            limit=self._limit,
            row_numbers=self._row_numbers,
            overflow=self._overflow,
        )
