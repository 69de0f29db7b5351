"""Command-line interface for rendering paginated text tables."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Any

import click

from .config import TableSettings
from .exceptions import PageTableError
from .glyphs import GLYPH_SETS
from .manifest import TableManifest, load_csv, load_manifest
from .models import HeaderOrientation
from .table import PageTable

ORIENTATION_CHOICES = [o.value for o in HeaderOrientation]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _parse_max_widths(values: tuple[str, ...]) -> dict[int, int]:
    """Parse repeated ``INDEX=WIDTH`` options."""
    widths: dict[int, int] = {}
    for value in values:
        index, sep, width = value.partition("=")
        try:
            parsed = (int(index), int(width)) if sep else None
        except ValueError:
            parsed = None
        if parsed is None or parsed[1] < 0:
            raise click.BadParameter(
                f"expected INDEX=WIDTH with WIDTH >= 0, got {value!r}", param_hint="--max-width"
            )
        widths[parsed[0]] = parsed[1]
    return widths


def _load_settings(
    columns_per_page: int | None, border: str | None, strict: bool
) -> TableSettings:
    settings = TableSettings.from_environment()
    overrides: dict[str, Any] = {}
    if columns_per_page is not None:
        overrides["columns_per_page"] = columns_per_page
    if border is not None:
        overrides["border"] = border
    if strict:
        overrides["strict"] = True
    return dataclasses.replace(settings, **overrides)


@click.group()
@click.version_option(package_name="page-table")
def cli() -> None:
    """Paginated fixed-width text table renderer."""
    pass


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option("--title", "-t", default=None, help="Title bar text (overrides the document).")
@click.option(
    "--orientation",
    "-o",
    type=click.Choice(ORIENTATION_CHOICES, case_sensitive=False),
    default=None,
    help="Header orientation (default: the document's, or column for CSV).",
)
@click.option(
    "--columns-per-page",
    "-c",
    type=int,
    default=None,
    help="Maximum data columns per page, at least 3 (env: PAGE_TABLE_COLUMNS_PER_PAGE).",
)
@click.option(
    "--border",
    type=click.Choice(sorted(GLYPH_SETS), case_sensitive=False),
    default=None,
    help="Border glyph set (env: PAGE_TABLE_BORDER, default: box).",
)
@click.option(
    "--max-width",
    "-w",
    "max_widths",
    multiple=True,
    metavar="INDEX=WIDTH",
    help="Pin column INDEX (0-based) at WIDTH characters. Repeatable.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on out-of-range column indices (env: PAGE_TABLE_STRICT).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log layout decisions.")
def render(
    file: str,
    title: str | None,
    orientation: str | None,
    columns_per_page: int | None,
    border: str | None,
    max_widths: tuple[str, ...],
    strict: bool,
    verbose: bool,
) -> None:
    """Render a YAML or CSV table document.

    FILE is a .yaml/.yml or .csv file, or - to read CSV from standard input.
    """
    _configure_logging(verbose)
    widths = _parse_max_widths(max_widths)

    try:
        settings = _load_settings(columns_per_page, border, strict)
        manifest = _read_document(file, orientation)
        if title is not None:
            manifest = dataclasses.replace(manifest, title=title)
        if widths:
            merged = {**dict(manifest.widths), **widths}
            manifest = dataclasses.replace(manifest, widths=tuple(sorted(merged.items())))
        table = manifest.build(settings)
    except PageTableError as e:
        raise click.ClickException(str(e)) from e

    click.echo(table.render(), nl=False)


def _read_document(file: str, orientation: str | None) -> TableManifest:
    parsed = HeaderOrientation.parse(orientation) if orientation is not None else None
    if file == "-":
        stdin = click.get_text_stream("stdin")
        return load_csv(stdin, "<stdin>", parsed or HeaderOrientation.COLUMN)
    return load_manifest(file, parsed)


@cli.command()
@click.option(
    "--border",
    type=click.Choice(sorted(GLYPH_SETS), case_sensitive=False),
    default=None,
    help="Border glyph set (env: PAGE_TABLE_BORDER, default: box).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log layout decisions.")
def demo(border: str | None, verbose: bool) -> None:
    """Print a sample table with row headers and a title bar."""
    _configure_logging(verbose)
    try:
        settings = _load_settings(None, border, False)
    except PageTableError as e:
        raise click.ClickException(str(e)) from e

    click.echo(build_demo_table(settings).render(), nl=False)


def build_demo_table(settings: TableSettings | None = None) -> PageTable:
    """Build the sample table shown by ``page-table demo``."""
    settings = settings if settings is not None else TableSettings()
    table = settings.create_table("01234567890123456789", 0, 9)
    table.set_header_orientation(HeaderOrientation.ROW)
    table.set_columns_for_page(9)

    table.add_row(iter("ABCDEFGHI"))
    table.add_row(range(1, 10))
    table.add_row(["N", "A", "A", "A", "A", "B", "F", "F", "H"])

    table.update_header_at(0, "Vi")
    table.update_header_at(1, "Di")
    table.update_header_at(2, "Pi")
    return table


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
