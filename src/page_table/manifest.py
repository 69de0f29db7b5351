"""YAML and CSV table documents."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any, TextIO

import yaml

from .config import TableSettings
from .exceptions import ManifestError
from .models import CellValue, HeaderOrientation
from .table import PageTable

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
CSV_SUFFIXES = (".csv",)


@dataclass(frozen=True)
class TableManifest:
    """
    Parsed table document.

    Example YAML:
        title: Quarterly report
        orientation: column
        columns_per_page: 4
        headers: [Region, Q1, Q2]
        rows:
          - [North, 10, 12.5]
          - [South, 8, 9]
        widths: {0: 8}

    Pinned widths are held as sorted ``(index, width)`` pairs so the
    manifest stays hashable.
    """

    title: str = ""
    orientation: HeaderOrientation = HeaderOrientation.COLUMN
    columns_per_page: int | None = None
    headers: tuple[str, ...] = ()
    rows: tuple[tuple[CellValue, ...], ...] = ()
    widths: tuple[tuple[int, int], ...] = ()

    @property
    def column_count(self) -> int:
        """Number of columns needed to hold every row (and column header)."""
        widest_row = max((len(row) for row in self.rows), default=0)
        if self.orientation is HeaderOrientation.COLUMN:
            return max(widest_row, len(self.headers))
        return widest_row

    @classmethod
    def from_dict(cls, d: dict[str, Any], source: str = "<dict>") -> TableManifest:
        """
        Build a manifest from a parsed YAML mapping.

        Raises:
            ManifestError: If a key holds a value of the wrong shape
        """
        title = d.get("title") or ""
        if not isinstance(title, str):
            raise ManifestError(source, "'title' must be a string")

        try:
            orientation = HeaderOrientation.parse(d.get("orientation", "column"))
        except ValueError as e:
            raise ManifestError(source, str(e)) from None

        columns_per_page = d.get("columns_per_page")
        if columns_per_page is not None and (
            isinstance(columns_per_page, bool) or not isinstance(columns_per_page, int)
        ):
            raise ManifestError(source, "'columns_per_page' must be an integer")

        raw_headers = d.get("headers") or []
        if not isinstance(raw_headers, list):
            raise ManifestError(source, "'headers' must be a list")
        headers = tuple("" if h is None else str(h) for h in raw_headers)

        raw_rows = d.get("rows") or []
        if not isinstance(raw_rows, list):
            raise ManifestError(source, "'rows' must be a list of lists")
        rows = []
        for number, raw_row in enumerate(raw_rows, start=1):
            if not isinstance(raw_row, list):
                raise ManifestError(source, f"row {number} must be a list")
            rows.append(tuple(_coerce_value(value, source, number) for value in raw_row))

        raw_widths = d.get("widths") or {}
        if not isinstance(raw_widths, dict):
            raise ManifestError(source, "'widths' must be a mapping of column index to width")
        widths: dict[int, int] = {}
        for index, width in raw_widths.items():
            if not isinstance(index, int) or not isinstance(width, int) or width < 0:
                raise ManifestError(
                    source, f"invalid width entry {index!r}: {width!r} (expected int: int >= 0)"
                )
            widths[index] = width

        return cls(
            title=title,
            orientation=orientation,
            columns_per_page=columns_per_page,
            headers=headers,
            rows=tuple(rows),
            widths=tuple(sorted(widths.items())),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "title": self.title,
            "orientation": self.orientation.value,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }
        if self.columns_per_page is not None:
            result["columns_per_page"] = self.columns_per_page
        if self.widths:
            result["widths"] = dict(self.widths)
        return result

    def build(self, settings: TableSettings | None = None) -> PageTable:
        """
        Create a populated table from this document.

        Args:
            settings: Defaults for glyphs, strictness and columns per page.
                The document's own ``columns_per_page`` wins when present.
        """
        settings = settings if settings is not None else TableSettings()
        table = settings.create_table(self.title, 0, 0, self.orientation)
        if self.columns_per_page is not None:
            table.set_columns_for_page(self.columns_per_page)

        if self.orientation is HeaderOrientation.COLUMN:
            table.add_header(self.headers)
        table.set_column_count(self.column_count)

        for row in self.rows:
            table.add_row(row)

        if self.orientation is HeaderOrientation.ROW:
            for index, label in enumerate(self.headers):
                if index < table.row_count:
                    table.update_header_at(index, label)
                else:
                    table.add_header(label)
        elif self.orientation is HeaderOrientation.NONE and self.headers:
            logger.debug("Ignoring %d header(s): orientation is none", len(self.headers))

        for index, width in self.widths:
            table.set_column_max_width(index, width)
        return table


def _coerce_value(value: Any, source: str, row: int) -> CellValue:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    # YAML turns unquoted ISO dates into date objects
    if isinstance(value, date):
        return value.isoformat()
    raise ManifestError(source, f"row {row} holds a non-scalar value: {value!r}")


def load_yaml(stream: TextIO, source: str = "<stream>") -> TableManifest:
    """Parse a YAML table document."""
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ManifestError(source, f"YAML parse error: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(source, "YAML document must contain a mapping")
    return TableManifest.from_dict(data, source)


def load_csv(
    stream: TextIO,
    source: str = "<stream>",
    orientation: HeaderOrientation = HeaderOrientation.COLUMN,
) -> TableManifest:
    """
    Parse CSV data; the first record holds the column headers.

    Values are kept as text, exactly as they appear in the file. With an
    orientation other than COLUMN the first record is ordinary data.
    """
    try:
        records = list(csv.reader(stream))
    except csv.Error as e:
        raise ManifestError(source, f"CSV parse error: {e}") from e

    headers: tuple[str, ...] = ()
    if orientation is HeaderOrientation.COLUMN and records:
        headers = tuple(records.pop(0))
    return TableManifest(
        orientation=orientation,
        headers=headers,
        rows=tuple(tuple(record) for record in records),
    )


def load_manifest(
    path: str | Path, orientation: HeaderOrientation | None = None
) -> TableManifest:
    """
    Load a table document, choosing the parser from the file suffix.

    Args:
        path: A .yaml, .yml or .csv file
        orientation: Overrides the document's orientation. CSV files
            default to COLUMN, taking their first record as headers.

    Raises:
        ManifestError: If the suffix is unknown or the content is malformed
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES + CSV_SUFFIXES:
        raise ManifestError(
            str(path), f"unsupported file type {suffix or '(none)'!r}; use .yaml, .yml or .csv"
        )

    if suffix in CSV_SUFFIXES:
        with open(path, newline="", encoding="utf-8") as f:
            return load_csv(f, str(path), orientation or HeaderOrientation.COLUMN)

    with open(path, encoding="utf-8") as f:
        manifest = load_yaml(f, str(path))
    if orientation is not None:
        manifest = replace(manifest, orientation=orientation)
    return manifest
