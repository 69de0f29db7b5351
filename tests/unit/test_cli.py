"""Tests for CLI commands."""

import pytest
import yaml
from click.testing import CliRunner

from page_table.cli import build_demo_table, cli
from page_table.config import BORDER_ENV_VAR, COLUMNS_PER_PAGE_ENV_VAR


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def document(tmp_path) -> str:
    """A small YAML table document."""
    path = tmp_path / "table.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "title": "Stock",
                "headers": ["Item", "Qty"],
                "rows": [["bolt", 120], ["nut", 75]],
            }
        )
    )
    return str(path)


class TestCLI:
    """Tests for the command group."""

    def test_cli_help(self, runner: CliRunner) -> None:
        """Help lists both commands."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Paginated fixed-width text table renderer" in result.output
        assert "render" in result.output
        assert "demo" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        """Render help documents its options."""
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        for option in ("--title", "--orientation", "--columns-per-page", "--border"):
            assert option in result.output
        assert "INDEX=WIDTH" in result.output


class TestDemo:
    """Tests for `page-table demo`."""

    def test_demo_output(self, runner: CliRunner) -> None:
        """Demo prints the sample table."""
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert result.output == build_demo_table().render()
        assert "│Vi│A│B│C│D│E│F│G│H│I│" in result.output

    def test_demo_ascii(self, runner: CliRunner) -> None:
        """The border option switches glyph sets."""
        result = runner.invoke(cli, ["demo", "--border", "ascii"])
        assert result.exit_code == 0
        assert "|Pi|N|A|A|A|A|B|F|F|H|" in result.output

    def test_demo_border_from_environment(self, runner: CliRunner, monkeypatch) -> None:
        """PAGE_TABLE_BORDER selects the glyph set."""
        monkeypatch.setenv(BORDER_ENV_VAR, "ascii")
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert result.output.startswith(".")

    def test_demo_invalid_environment(self, runner: CliRunner, monkeypatch) -> None:
        """Bad settings are reported as CLI errors."""
        monkeypatch.setenv(COLUMNS_PER_PAGE_ENV_VAR, "lots")
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 1
        assert "PAGE_TABLE_COLUMNS_PER_PAGE" in result.output


class TestRender:
    """Tests for `page-table render`."""

    def test_render_yaml(self, runner: CliRunner, document: str) -> None:
        """A YAML document renders with its title and headers."""
        result = runner.invoke(cli, ["render", document])
        assert result.exit_code == 0
        assert result.output == (
            "┌────────┐\n"
            "│Stock   │\n"
            "├────┬───┤\n"
            "│Item│Qty│\n"
            "├────┼───┤\n"
            "│bolt│120│\n"
            "├────┼───┤\n"
            "│nut │75 │\n"
            "└────┴───┘\n"
            "\n"
        )

    def test_render_title_override(self, runner: CliRunner, document: str) -> None:
        """--title replaces the document title."""
        result = runner.invoke(cli, ["render", document, "--title", "Parts"])
        assert result.exit_code == 0
        assert "│Parts   │" in result.output

    def test_render_max_width(self, runner: CliRunner, document: str) -> None:
        """--max-width pins a column and truncates its content."""
        result = runner.invoke(cli, ["render", document, "-w", "0=2"])
        assert result.exit_code == 0
        assert "│bo│120│" in result.output

    def test_render_invalid_max_width(self, runner: CliRunner, document: str) -> None:
        """Malformed --max-width values are usage errors."""
        result = runner.invoke(cli, ["render", document, "--max-width", "wide"])
        assert result.exit_code == 2
        assert "INDEX=WIDTH" in result.output

    def test_render_strict_rejects_missing_column(
        self, runner: CliRunner, document: str
    ) -> None:
        """--strict turns an out-of-range --max-width into an error."""
        result = runner.invoke(cli, ["render", document, "-w", "9=3", "--strict"])
        assert result.exit_code == 1
        assert "column index 9 out of range" in result.output

    def test_render_csv_from_stdin(self, runner: CliRunner) -> None:
        """'-' reads CSV from standard input."""
        result = runner.invoke(
            cli, ["render", "-", "--columns-per-page", "3"], input="a,b,c,d\n1,2,3,4\n"
        )
        assert result.exit_code == 0
        assert result.output.count("┌") == 2
        assert "│a│b│c│" in result.output
        assert "│d│" in result.output

    def test_render_csv_row_orientation(self, runner: CliRunner, tmp_path) -> None:
        """--orientation row makes every CSV record data with row labels."""
        path = tmp_path / "data.csv"
        path.write_text("x,y\n")
        result = runner.invoke(cli, ["render", str(path), "-o", "row"])
        assert result.exit_code == 0
        assert "│Row 1│x│y│" in result.output

    def test_render_bad_document(self, runner: CliRunner, tmp_path) -> None:
        """Malformed documents exit with an error message."""
        path = tmp_path / "bad.yaml"
        path.write_text("rows: 5\n")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Error: Invalid table document" in result.output

    def test_render_missing_file(self, runner: CliRunner) -> None:
        """Nonexistent paths are rejected by click."""
        result = runner.invoke(cli, ["render", "missing.yaml"])
        assert result.exit_code == 2
