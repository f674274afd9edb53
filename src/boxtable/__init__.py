"""
boxtable: fixed-width text tables for terminal output.

This library renders tabular data with:
- Box-drawing or ASCII borders from a positional glyph palette
- Per-column header/data/footer alignment, visibility and fixed widths
- Title lines that widen the columns beneath them
- Optional row numbers, footers and row limits
- Display-width aware sizing for wide (CJK) characters

Example:
    from boxtable import FANCY, Column, Table

    name = Column.builder().header("name").build()
    age = Column.builder().header("age").data_align("right").build()
    table = Table.builder().title("people").border_style(FANCY).columns(name, age).build()
    table.add_data([["John", 25], ["Mary", 16]])
    print(table.render(), end="")
"""

from .border import BASIC, BASIC2, FANCY, FANCY2, BorderStyle
from .column import Column, ColumnBuilder
from .exceptions import (
    BoxTableError,
    ConfigurationError,
    OutputError,
    StructureError,
    UnknownColumnError,
)
from .justify import justify
from .layout import RenderPlan, plan_layout, render
from .models import ELLIPSIS, PADDING, HorizontalAlign, OverflowBehaviour
from .table import Table, TableBuilder, write_output
from .width import display_width

__all__ = [
    # Tables
    "Table",
    "TableBuilder",
    "Column",
    "ColumnBuilder",
    # Styles
    "BorderStyle",
    "BASIC",
    "BASIC2",
    "FANCY",
    "FANCY2",
    # Enums and constants
    "HorizontalAlign",
    "OverflowBehaviour",
    "ELLIPSIS",
    "PADDING",
    # Layout
    "RenderPlan",
    "plan_layout",
    "render",
    "justify",
    "display_width",
    "write_output",
    # Exceptions
    "BoxTableError",
    "ConfigurationError",
    "StructureError",
    "UnknownColumnError",
    "OutputError",
]
