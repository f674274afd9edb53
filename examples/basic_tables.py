#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the core boxtable API: builders, limits, row numbers,
fixed widths with clipping, and the preset border styles.

Run this example:
    uv run python examples/basic_tables.py

The default border style can be changed without touching code:
    BOXTABLE_STYLE=fancy uv run python examples/basic_tables.py
"""

from boxtable import (
    FANCY2,
    Column,
    HorizontalAlign,
    OverflowBehaviour,
    Table,
    UnknownColumnError,
)
from boxtable.config import get_border_style

PEOPLE = [
    ["John", 25, "Likes long walks on the beach"],
    ["Tom", 14, None],
    ["Mary", 16, "张远航 is a friend"],
    ["Anne", 31, "Prefers tea"],
]


def simple_table() -> None:
    """Headers, data and the default style."""
    print("=== Simple Table ===\n")

    table = Table.builder().border_style(get_border_style()).build()
    table.add_header("name", "age", "comment")
    table.add_data(PEOPLE)
    table.print()


def configured_table() -> None:
    """Title, row numbers, a limit, a fixed width column and a footer."""
    print("\n=== Configured Table ===\n")

    table = (
        Table.builder()
        .title("people")
        .title("sample data")
        .border_style(FANCY2)
        .row_numbers()
        .limit(3)
        .overflow(OverflowBehaviour.CLIP_LEFT)
        .column(Column.builder().header("name").build())
        .column(
            Column.builder()
            .header("age")
            .data_align(HorizontalAlign.RIGHT)
            .footer("avg 21.5")
            .build()
        )
        .column(Column.builder().header("comment").width(12).build())
        .build()
    )
    table.add_data(PEOPLE)
    table.print()


def cell_by_cell() -> None:
    """Filling columns one cell at a time by header name."""
    print("\n=== Cell by Cell ===\n")

    table = Table.builder().build()
    table.add_header("key", "value")
    for key, value in {"region": "eu-west-1", "replicas": 3, "debug": False}.items():
        table.add_cell("key", key)
        table.add_cell("value", value)
    table.print()

    try:
        table.add_cell("missing", "x")
    except UnknownColumnError as e:
        print(f"Expected error: {e}")


def main() -> None:
    simple_table()
    configured_table()
    cell_by_cell()


if __name__ == "__main__":
    main()
