"""Command-line interface for rendering CSV data as text tables."""

import csv
import logging
import sys
from typing import TextIO

import click

from .border import PRESETS
from .column import Column
from .config import get_border_style
from .exceptions import BoxTableError
from .models import HorizontalAlign, OverflowBehaviour
from .table import Table

logger = logging.getLogger(__name__)


def _parse_assignments(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Turn ``("NAME=VALUE", ...)`` into an upper-cased ``{NAME: VALUE}`` mapping."""
    parsed: dict[str, str] = {}
    for value in values:
        name, sep, setting = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {value!r}", param_hint=option)
        parsed[name.strip().upper()] = setting
    return parsed


def build_table(
    rows: list[list[str]],
    titles: tuple[str, ...] = (),
    style: str | None = None,
    limit: int | None = None,
    row_numbers: bool = False,
    overflow: str = "clip-right",
    hidden: tuple[str, ...] = (),
    widths: dict[str, str] | None = None,
    footers: dict[str, str] | None = None,
    aligns: dict[str, str] | None = None,
) -> Table:
    """
    Build a table from CSV rows, the first row holding the headers.

    Raises:
        BoxTableError: If an option value is invalid or the rows are ragged
        click.BadParameter: If a column width is not an integer
    """
    widths = widths or {}
    footers = footers or {}
    aligns = aligns or {}
    hidden_names = {name.upper() for name in hidden}
    headers, data = (rows[0], rows[1:]) if rows else ([], [])

    builder = (
        Table.builder()
        .border_style(get_border_style(style))
        .limit(limit)
        .row_numbers(row_numbers)
        .overflow(overflow)
    )
    for title in titles:
        builder.title(title)

    for header in headers:
        key = header.upper()
        column = Column.builder().header(header).visible(key not in hidden_names)
        if key in footers:
            column.footer(footers[key])
        if key in aligns:
            column.data_align(aligns[key])
        if key in widths:
            try:
                column.width(int(widths[key]))
            except ValueError:
                raise click.BadParameter(
                    f"width for {header!r} must be an integer", param_hint="--width"
                ) from None
        builder.column(column.build())

    table = builder.build()
    table.add_data(data)
    return table


@click.group()
@click.version_option(package_name="boxtable")
@click.option("--verbose", "-v", is_flag=True, help="Log layout decisions to stderr")
def cli(verbose: bool) -> None:
    """boxtable text table rendering CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--title", "-t", "titles", multiple=True, help="Title line (repeatable)")
@click.option(
    "--style",
    type=click.Choice(sorted(PRESETS), case_sensitive=False),
    default=None,
    help="Border style (default: BOXTABLE_STYLE env var or basic2)",
)
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum data rows")
@click.option(
    "--row-numbers/--no-row-numbers",
    default=False,
    help="Show a row number column",
)
@click.option(
    "--overflow",
    type=click.Choice([b.value for b in OverflowBehaviour], case_sensitive=False),
    default=OverflowBehaviour.CLIP_RIGHT.value,
    help="Side clipped when content exceeds a fixed column width",
)
@click.option("--hide", "hidden", multiple=True, help="Hide the column with this header")
@click.option("--width", "widths", multiple=True, help="Fixed column width as NAME=N")
@click.option("--footer", "footers", multiple=True, help="Column footer as NAME=TEXT")
@click.option(
    "--align",
    "aligns",
    multiple=True,
    help=f"Data alignment as NAME=({'|'.join(a.value for a in HorizontalAlign)})",
)
def render(
    source: TextIO,
    titles: tuple[str, ...],
    style: str | None,
    limit: int | None,
    row_numbers: bool,
    overflow: str,
    hidden: tuple[str, ...],
    widths: tuple[str, ...],
    footers: tuple[str, ...],
    aligns: tuple[str, ...],
) -> None:
    """Render CSV data (first row = headers) as a table."""
    rows = [row for row in csv.reader(source) if row]
    logger.debug("Read %d CSV rows", len(rows))
    try:
        table = build_table(
            rows,
            titles=titles,
            style=style,
            limit=limit,
            row_numbers=row_numbers,
            overflow=overflow,
            hidden=hidden,
            widths=_parse_assignments(widths, "--width"),
            footers=_parse_assignments(footers, "--footer"),
            aligns=_parse_assignments(aligns, "--align"),
        )
        click.echo(table.render(), nl=False)
    except BoxTableError as e:
        click.echo(f"✗ Failed to render table: {e}", err=True)
        sys.exit(1)


@cli.command()
def styles() -> None:
    """Show a sample table in every preset border style."""
    for name, style in sorted(PRESETS.items()):
        table = Table.builder().title(name).border_style(style).build()
        table.add_header("name", "age")
        table.add_data([["John", 25], ["Mary", 16]])
        click.echo(table.render())
