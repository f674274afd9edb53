"""Benchmark test fixtures."""

import pytest

from boxtable import Column, Table


@pytest.fixture
def large_table() -> Table:
    """A 1000-row table with a title, row numbers and a fixed-width column."""
    table = (
        Table.builder()
        .title("benchmark")
        .row_numbers()
        .column(Column.builder().header("id").data_align("right").build())
        .column(Column.builder().header("name").build())
        .column(Column.builder().header("comment").width(20).build())
        .build()
    )
    table.add_data(
        [[i, f"user-{i}", "a fairly long comment that will be clipped"] for i in range(1000)]
    )
    return table
