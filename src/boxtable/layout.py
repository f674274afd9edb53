"""
Layout engine.

Rendering happens in two steps. :func:`plan_layout` derives an immutable
:class:`RenderPlan` from the table's current state: it validates the shape,
applies the row limit, injects the row-number column and reconciles column
widths with the title width. It works on copies, so the table itself is
never modified and repeated renders produce identical output.
:func:`render` then walks the plan and emits the grid line by line.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import border
from .column import Column
from .config import DEFAULT_LINE_SEPARATOR
from .exceptions import StructureError
from .models import PADDING, HorizontalAlign
from .renderer import LineWriter
from .width import display_width

if TYPE_CHECKING:
    from .table import Table

logger = logging.getLogger(__name__)

COLUMN_GAP = 1 + 2 * PADDING
"""Columns between the content of two adjacent cells: padding, separator, padding."""


@dataclass(frozen=True)
class RenderPlan:
    """
    Snapshot of everything needed to draw a table.

    Attributes:
        title_lines: Upper-cased title lines
        title_width: Width of a title line's content area (0 without titles)
        columns: Visible columns, widths already reconciled with the titles
        row_count: Number of data lines (at least 1)
    """

    title_lines: tuple[str, ...]
    title_width: int
    columns: tuple[Column, ...]
    row_count: int

    @property
    def widths(self) -> list[int]:
        return [column.width for column in self.columns]

    @property
    def has_footer(self) -> bool:
        return any(column.footer for column in self.columns)

    def data_row(self, index: int) -> list[str]:
        return [column.cell(index) for column in self.columns]


def validate_columns(columns: Sequence[Column]) -> None:
    """
    Check that the table can be rendered.

    Raises:
        StructureError: If there are no columns or the cell counts differ
    """
    if not columns:
        raise StructureError("No columns added")
    row_count = columns[0].cell_count
    for column in columns:
        if column.cell_count != row_count:
            raise StructureError(
                "All columns must have the same number of rows: "
                f"column {column.header!r} has {column.cell_count}, expected {row_count}"
            )


def row_number_column(row_count: int) -> Column:
    """Build the synthetic ``1..row_count`` column shown left of the data."""
    column = Column(header="", data_align=HorizontalAlign.CENTER)
    for number in range(1, row_count + 1):
        column.add_cell(number)
    return column


def content_width(columns: Sequence[Column]) -> int:
    """Width between the outer borders, excluding their padding."""
    if not columns:
        return 0
    return sum(column.width for column in columns) + (len(columns) - 1) * COLUMN_GAP


def distribute_extra_width(columns: Sequence[Column], extra: int) -> None:
    """
    Widen ``columns`` by ``extra`` in total.

    Every column but the last gets ``extra // n``; the last one absorbs the
    remainder.
    """
    if not columns or extra <= 0:
        return
    share = extra // len(columns)
    for column in columns[:-1]:
        column.width += share
    columns[-1].width += extra - share * (len(columns) - 1)


def reconcile_title_width(title_lines: Sequence[str], columns: Sequence[Column]) -> int:
    """
    Make the visible columns at least as wide as the widest title line.

    Returns:
        The title width: the widest title or the columns' content width,
        whichever is larger
    """
    current = content_width(columns)
    widest_title = max((display_width(line) for line in title_lines), default=0)
    if widest_title > current:
        logger.debug(
            "Distributing %d extra title width across %d columns",
            widest_title - current,
            len(columns),
        )
        distribute_extra_width(columns, widest_title - current)
    return max(widest_title, current)


def plan_layout(table: Table) -> RenderPlan:
    """
    Derive the render plan for ``table`` without modifying it.

    Raises:
        StructureError: If the table has no columns or uneven columns
    """
    columns = list(table.columns)
    validate_columns(columns)

    if table.limit is not None:
        columns = [column.limited(table.limit) for column in columns]
    # Fresh copies: the steps below add cells and change widths.
    columns = [column.copy() for column in columns]

    row_count = columns[0].cell_count
    if row_count == 0:
        for column in columns:
            column.add_cell("")
        row_count = 1

    if table.row_numbers:
        columns.insert(0, row_number_column(row_count))

    visible = [column for column in columns if column.visible]
    title_lines = table.title_lines
    title_width = reconcile_title_width(title_lines, visible) if title_lines else 0

    logger.debug(
        "Planned layout: %d rows, %d of %d columns visible, limit=%s",
        row_count,
        len(visible),
        len(columns),
        table.limit,
    )
    return RenderPlan(
        title_lines=tuple(title_lines),
        title_width=title_width,
        columns=tuple(visible),
        row_count=row_count,
    )


def render(table: Table, line_separator: str = DEFAULT_LINE_SEPARATOR) -> str:
    """
    Render ``table`` as text.

    Args:
        table: Table to draw
        line_separator: Appended to every line, including the last

    Returns:
        The complete grid

    Raises:
        StructureError: If the table has no columns or uneven columns
    """
    plan = plan_layout(table)
    style = table.border_style
    overflow = table.overflow
    widths = plan.widths
    left, separator, right = style.glyphs(border.CONTENT_LINE)
    writer = LineWriter(line_separator)

    def horizontal(positions: tuple[int, ...]) -> None:
        writer.horizontal_line(*style.glyphs(positions), widths)

    def content(values: Sequence[str], aligns: Sequence[HorizontalAlign]) -> None:
        writer.row(left, separator, right, values, aligns, widths, overflow)

    if plan.title_lines:
        horizontal(border.TOP_BORDER_WITH_TITLE)
        last = len(plan.title_lines) - 1
        for index, title in enumerate(plan.title_lines):
            writer.title_line(title, left, right, plan.title_width, overflow)
            if index == last:
                horizontal(border.TITLE_BOTTOM_BORDER)
            else:
                horizontal(border.TITLE_ROW_SEPARATOR)
    else:
        horizontal(border.TOP_BORDER)

    content([c.header for c in plan.columns], [c.header_align for c in plan.columns])
    horizontal(border.HEADER_BOTTOM_BORDER)

    data_aligns = [c.data_align for c in plan.columns]
    for index in range(plan.row_count):
        content(plan.data_row(index), data_aligns)
        if style.show_row_boundaries and index < plan.row_count - 1:
            horizontal(border.ROW_SEPARATOR)

    if plan.has_footer:
        horizontal(border.ROW_SEPARATOR)
        content([c.footer for c in plan.columns], [c.footer_align for c in plan.columns])

    horizontal(border.BOTTOM_BORDER)
    return writer.getvalue()
