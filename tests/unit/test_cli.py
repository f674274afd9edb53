"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from boxtable.cli import build_table, cli
from boxtable.config import STYLE_ENV_VAR
from boxtable.exceptions import ConfigurationError, StructureError

PEOPLE_CSV = "name,age\nJohn,25\nTom,14\nMary,16\n"


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(STYLE_ENV_VAR, raising=False)


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "boxtable text table rendering CLI" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--title" in result.output
        assert "--style" in result.output
        assert "--limit" in result.output
        assert "--row-numbers" in result.output
        assert "--overflow" in result.output
        assert "--hide" in result.output

    def test_render_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input=PEOPLE_CSV)
        assert result.exit_code == 0
        assert result.output == (
            "+------+-----+\n"
            "| NAME | AGE |\n"
            "+------+-----+\n"
            "| John | 25  |\n"
            "| Tom  | 14  |\n"
            "| Mary | 16  |\n"
            "+------+-----+\n"
        )

    def test_render_file(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "people.csv"
        source.write_text(PEOPLE_CSV, encoding="utf-8")
        result = runner.invoke(cli, ["render", str(source), "--style", "fancy"])
        assert result.exit_code == 0
        assert result.output.startswith("╔══════╤═════╗\n")

    def test_render_options(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "render",
                "--title",
                "people",
                "--row-numbers",
                "--limit",
                "1",
                "--align",
                "age=right",
                "--footer",
                "age=avg",
            ],
            input=PEOPLE_CSV,
        )
        assert result.exit_code == 0
        assert result.output == (
            "+----------------+\n"
            "|     PEOPLE     |\n"
            "+---+------+-----+\n"
            "|   | NAME | AGE |\n"
            "+---+------+-----+\n"
            "| 1 | John |  25 |\n"
            "| 2 | …    |   … |\n"
            "+---+------+-----+\n"
            "|   |      | avg |\n"
            "+---+------+-----+\n"
        )

    def test_render_hide_and_width(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--hide", "age", "--width", "name=3", "--overflow", "clip-left"],
            input=PEOPLE_CSV,
        )
        assert result.exit_code == 0
        assert "AGE" not in result.output
        assert "| …hn |" in result.output

    def test_render_style_from_env(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input=PEOPLE_CSV, env={STYLE_ENV_VAR: "fancy2"})
        assert result.exit_code == 0
        assert "╟──────┼─────╢" in result.output

    def test_render_ragged_csv_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input="name,age\nJohn\n")
        assert result.exit_code == 1
        assert "Failed to render table" in result.output

    def test_render_bad_assignment(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--width", "name"], input=PEOPLE_CSV)
        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output

    def test_render_bad_width(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--width", "name=wide"], input=PEOPLE_CSV)
        assert result.exit_code == 2
        assert "must be an integer" in result.output

    def test_styles(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["styles"])
        assert result.exit_code == 0
        assert "FANCY2" in result.output
        assert "╔" in result.output
        assert "+------+-----+" in result.output


class TestBuildTable:
    """Test build_table helper."""

    def test_headers_from_first_row(self) -> None:
        table = build_table([["name", "age"], ["John", "25"]])
        assert [c.header for c in table.columns] == ["NAME", "AGE"]
        assert table.columns[0].cells == ("John",)

    def test_empty_input_has_no_columns(self) -> None:
        table = build_table([])
        with pytest.raises(StructureError):
            table.render()

    def test_unknown_alignment(self) -> None:
        with pytest.raises(ConfigurationError):
            build_table([["name"]], aligns={"NAME": "middle"})
