"""Rendering benchmarks.

Run with:
    pytest tests/benchmark/test_render.py -v --benchmark-json=benchmark.json

Skip benchmarks in regular test runs:
    pytest -m "not benchmark" -v
"""

import pytest

from boxtable import FANCY2, Table, display_width, plan_layout

pytestmark = pytest.mark.benchmark


class TestRenderBenchmarks:
    """Benchmarks for the full render path."""

    def test_render_large_table(self, benchmark, large_table):
        """Planning plus line emission for 1000 rows."""
        output = benchmark(large_table.render)
        assert output.count("\n") == 1000 + 6

    def test_render_with_limit(self, benchmark, large_table):
        """A row limit should keep rendering cheap regardless of table size."""
        limited = (
            Table.builder()
            .limit(10)
            .columns(*large_table.columns)
            .build()
        )
        output = benchmark(limited.render)
        assert "…" in output

    def test_render_with_row_boundaries(self, benchmark, large_table):
        table = Table.builder().border_style(FANCY2).columns(*large_table.columns).build()
        benchmark(table.render)


class TestLayoutBenchmarks:
    """Benchmarks for planning and width measurement."""

    def test_plan_layout(self, benchmark, large_table):
        plan = benchmark(plan_layout, large_table)
        assert plan.row_count == 1000

    def test_display_width_wide_text(self, benchmark):
        text = "张远航 Crème brûlée " * 50
        assert benchmark(display_width, text) > len(text)
