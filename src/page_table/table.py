"""
Grid storage and column width policy.

``PageTable`` owns a rectangular grid of cells, an optional set of
header labels and one width entry per column (plus entry 0 for the
row-header column). Rendering is delegated to ``PageRenderer``.

Example:
    from page_table import HeaderOrientation, PageTable

    table = PageTable("Inventory", header_orientation=HeaderOrientation.COLUMN)
    table.add_header(["Item", "Qty", "In stock"])
    table.add_row(["bolt", 120, True])
    table.add_row(["nut", 75, False])
    table.print()
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from .exceptions import BoundsError
from .glyphs import BOX, BorderGlyphs
from .models import Cell, CellValue, ColumnWidth, HeaderOrientation, to_cell_text
from .renderer import PageLayout, PageRenderer

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS_PER_PAGE = 4
MIN_COLUMNS_PER_PAGE = 3


class PageTable:
    """
    A fixed-width text table paginated by columns.

    Out-of-range indices passed to the setters are ignored by default.
    With ``strict=True`` they raise ``BoundsError`` instead.

    Rendering may widen columns so an oversized title fits on the first
    page. The widened widths are kept: later pages and later renders
    use them too.
    """

    def __init__(
        self,
        title: str = "",
        row_count: int = 0,
        column_count: int = 0,
        header_orientation: HeaderOrientation | str = HeaderOrientation.NONE,
        *,
        columns_per_page: int = DEFAULT_COLUMNS_PER_PAGE,
        glyphs: BorderGlyphs | None = None,
        strict: bool = False,
    ) -> None:
        """
        Create a table of ``row_count`` x ``column_count`` empty cells.

        Args:
            title: Text of the title bar drawn above the first page
            row_count: Initial number of rows
            column_count: Initial number of columns
            header_orientation: COLUMN, ROW or NONE (or its name)
            columns_per_page: Maximum data columns per page (clamped to >= 3)
            glyphs: Border glyph set (default: box-drawing)
            strict: Raise ``BoundsError`` on out-of-range indices
        """
        self._orientation = HeaderOrientation.parse(header_orientation)
        self._title = title
        self._columns_per_page = DEFAULT_COLUMNS_PER_PAGE
        self._glyphs = glyphs if glyphs is not None else BOX
        self._strict = strict

        self._widths: list[ColumnWidth] = [ColumnWidth()]
        self._headers: list[str] = []
        self._rows: list[list[Cell]] = []

        self.set_columns_for_page(columns_per_page)
        self.set_row_count(row_count)
        self.set_column_count(column_count)

    def __repr__(self) -> str:
        return (
            f"PageTable(title={self._title!r}, rows={self.row_count}, "
            f"columns={self.column_count}, orientation={self._orientation.name})"
        )

    # -------------------------------------------------------------------------
    # Dimensions
    # -------------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._widths) - 1

    def get_row_count(self) -> int:
        return self.row_count

    def get_column_count(self) -> int:
        return self.column_count

    def set_column_count(self, columns: int) -> None:
        """
        Grow or shrink every row to exactly ``columns`` cells.

        New cells are empty and new width entries start unpinned at 0.
        Under COLUMN orientation the header list follows, new headers
        being named ``Column {n}``. Retained content is never moved.
        """
        if columns < 0:
            raise ValueError("column count must be non-negative")
        if columns == self.column_count and self._headers_match():
            return

        logger.debug("Resizing columns %d -> %d", self.column_count, columns)
        del self._widths[columns + 1 :]
        while len(self._widths) < columns + 1:
            self._widths.append(ColumnWidth())

        if self._orientation is HeaderOrientation.COLUMN:
            del self._headers[columns:]
            while len(self._headers) < columns:
                label = f"Column {len(self._headers) + 1}"
                self._headers.append(label)
                self._update_column_width(len(self._headers), len(label))

        for row in self._rows:
            del row[columns:]
            row.extend(Cell() for _ in range(columns - len(row)))

    def set_row_count(self, rows: int) -> None:
        """
        Grow or shrink the grid to exactly ``rows`` rows.

        New rows hold one empty cell per column. Under ROW orientation
        the header list follows, new headers being named ``Row {n}``.
        """
        if rows < 0:
            raise ValueError("row count must be non-negative")
        if rows == self.row_count and self._headers_match():
            return

        logger.debug("Resizing rows %d -> %d", self.row_count, rows)
        if self._orientation is HeaderOrientation.ROW:
            del self._headers[rows:]
            while len(self._headers) < rows:
                label = f"Row {len(self._headers) + 1}"
                self._headers.append(label)
                self._update_column_width(0, len(label))

        del self._rows[rows:]
        while len(self._rows) < rows:
            self._rows.append([Cell() for _ in range(self.column_count)])

    def _headers_match(self) -> bool:
        if self._orientation is HeaderOrientation.COLUMN:
            return len(self._headers) == self.column_count
        if self._orientation is HeaderOrientation.ROW:
            return len(self._headers) == self.row_count
        return not self._headers

    # -------------------------------------------------------------------------
    # Headers
    # -------------------------------------------------------------------------

    def get_header_orientation(self) -> HeaderOrientation:
        return self._orientation

    def set_header_orientation(self, orientation: HeaderOrientation | str) -> None:
        """
        Switch header orientation.

        Labels of the previous orientation are discarded; switching to
        COLUMN or ROW auto-names one header per column or row. Columns
        that lose their header are re-fitted to their content.
        """
        orientation = HeaderOrientation.parse(orientation)
        if orientation is self._orientation:
            return

        previous = self._orientation
        logger.debug("Header orientation %s -> %s", previous.name, orientation.name)
        self._orientation = orientation
        self._headers.clear()
        self._widths[0] = ColumnWidth()

        if previous is HeaderOrientation.COLUMN:
            for index in range(self.column_count):
                if not self._widths[index + 1].pinned:
                    self._widths[index + 1].width = self._content_width(index)

        if orientation is HeaderOrientation.COLUMN:
            self.set_column_count(self.column_count)
        elif orientation is HeaderOrientation.ROW:
            self.set_row_count(self.row_count)

    def get_headers(self) -> list[str]:
        """Return a copy of the current header labels."""
        return list(self._headers)

    def add_header(self, header: str | Iterable[str]) -> None:
        """
        Append one or more header labels.

        Under COLUMN orientation each label adds a column, under ROW
        orientation a row. Header text sets the width of its column.
        Ignored under NONE orientation.
        """
        labels = [header] if isinstance(header, str) else list(header)
        if self._orientation is HeaderOrientation.NONE:
            logger.debug("Ignoring %d header label(s): orientation is NONE", len(labels))
            return

        if self._orientation is HeaderOrientation.COLUMN:
            start = self.column_count
            self.set_column_count(start + len(labels))
            for offset, label in enumerate(labels):
                self._headers[start + offset] = label
                self._update_column_width(start + offset + 1, len(label), force=True)
        else:
            start = self.row_count
            self.set_row_count(start + len(labels))
            for offset, label in enumerate(labels):
                self._headers[start + offset] = label
                self._update_column_width(0, len(label), force=True)

    def update_header_at(self, index: int, header: str) -> None:
        """Replace the label at ``index``; out-of-range indices are ignored."""
        if not self._in_bounds("header", index, len(self._headers)):
            return

        self._headers[index] = header
        if self._orientation is HeaderOrientation.COLUMN:
            self._update_column_width(index + 1, len(header), force=True)
        else:
            # Row labels share entry 0, sized by the label last written
            self._update_column_width(0, len(header), force=True)

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    def add_row(self, values: Iterable[CellValue]) -> None:
        """
        Append a row and fill it from ``values``.

        Values beyond the column count are dropped; missing values leave
        the trailing cells empty.
        """
        texts = [to_cell_text(value) for value in list(values)[: self.column_count]]
        self.set_row_count(self.row_count + 1)
        row = self._rows[-1]
        for column, text in enumerate(texts):
            row[column].text = text
            self._update_column_width(column + 1, len(text))

    def add_column(self, values: Iterable[CellValue]) -> None:
        """
        Append a column and fill it from ``values``, one value per row.

        Values beyond the row count are dropped; missing values leave
        the trailing cells empty.
        """
        texts = [to_cell_text(value) for value in list(values)[: self.row_count]]
        self.set_column_count(self.column_count + 1)
        for row, text in zip(self._rows, texts):
            row[-1].text = text
            self._update_column_width(self.column_count, len(text))

    def update_value_at(self, row: int, column: int, value: CellValue) -> None:
        """Write one cell; out-of-range indices are ignored."""
        if not (
            self._in_bounds("row", row, self.row_count)
            and self._in_bounds("column", column, self.column_count)
        ):
            return

        length = self._rows[row][column].assign(value)
        self._update_column_width(column + 1, length)

    def get_value_at(self, row: int, column: int) -> str | None:
        """Return the text of one cell, or None for ignored out-of-range indices."""
        if not (
            self._in_bounds("row", row, self.row_count)
            and self._in_bounds("column", column, self.column_count)
        ):
            return None
        return self._rows[row][column].text

    # -------------------------------------------------------------------------
    # Column widths
    # -------------------------------------------------------------------------

    def set_column_max_width(self, index: int, width: int) -> None:
        """
        Pin a column at ``width`` characters.

        Longer content no longer widens the column and is truncated when
        rendered.
        """
        if width < 0:
            raise ValueError("width must be non-negative")
        if not self._in_bounds("column", index, self.column_count):
            return

        entry = self._widths[index + 1]
        entry.width = width
        entry.pinned = True
        logger.debug("Pinned column %d at width %d", index, width)

    def set_column_auto_width(self, index: int) -> None:
        """
        Unpin a column and fit it to its header and current content.

        The running maximum is not tracked while a column is pinned, so
        the whole column is rescanned.
        """
        if not self._in_bounds("column", index, self.column_count):
            return

        entry = self._widths[index + 1]
        entry.pinned = False
        entry.width = self._content_width(index)
        logger.debug("Column %d auto-fitted to width %d", index, entry.width)

    def get_column_width(self, index: int) -> int | None:
        if not self._in_bounds("column", index, self.column_count):
            return None
        return self._widths[index + 1].width

    def is_column_pinned(self, index: int) -> bool | None:
        if not self._in_bounds("column", index, self.column_count):
            return None
        return self._widths[index + 1].pinned

    def get_row_header_width(self) -> int:
        return self._widths[0].width

    def _content_width(self, index: int) -> int:
        width = len(self._headers[index]) if self._orientation is HeaderOrientation.COLUMN else 0
        for row in self._rows:
            width = max(width, len(row[index].text))
        return width

    def _update_column_width(self, index: int, width: int, force: bool = False) -> None:
        # index addresses the width entries: 0 is the row-header column
        entry = self._widths[index]
        if entry.pinned:
            return
        entry.width = width if force else max(entry.width, width)

    # -------------------------------------------------------------------------
    # Page configuration
    # -------------------------------------------------------------------------

    def get_title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    def get_columns_for_page(self) -> int:
        return self._columns_per_page

    def set_columns_for_page(self, columns: int) -> None:
        """Set the maximum data columns per page, clamped to at least 3."""
        self._columns_per_page = max(columns, MIN_COLUMNS_PER_PAGE)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Return every page as text, each followed by a blank line."""
        layout = PageLayout(
            title=self._title,
            orientation=self._orientation,
            headers=self._headers,
            rows=self._rows,
            widths=self._widths,
            columns_per_page=self._columns_per_page,
        )
        return PageRenderer(self._glyphs).render(layout)

    def print(self, file: TextIO | None = None) -> None:
        """Write every page to ``file`` (default: standard output)."""
        stream = file if file is not None else sys.stdout
        stream.write(self.render())

    def _in_bounds(self, kind: str, index: int, limit: int) -> bool:
        if 0 <= index < limit:
            return True
        if self._strict:
            raise BoundsError(kind, index, limit)
        logger.debug("Ignoring out-of-range %s index %d (count: %d)", kind, index, limit)
        return False
