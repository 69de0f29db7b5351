"""
Paginated table renderer with box-drawing borders.

A table wider than ``columns_per_page`` columns is split into pages,
each drawn as a complete bordered block followed by a blank line:

    ┌──────────────┐
    │Inventory     │
    ├────┬───┬─────┤
    │Item│Qty│Price│
    ├────┼───┼─────┤
    │bolt│120│0.10 │
    └────┴───┴─────┘

Cell text is left-aligned and padded to the column width, or cut to
the column width when longer. There is no wrapping and no ellipsis.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .glyphs import BOX, BorderGlyphs, BorderLine
from .models import Cell, ColumnWidth, HeaderOrientation

logger = logging.getLogger(__name__)


@dataclass
class PageLayout:
    """
    Table state read by the renderer.

    ``widths`` is the table's own list of width entries (entry 0 being
    the row-header column), not a copy: title reflow widens them in place.
    """

    title: str
    orientation: HeaderOrientation
    headers: list[str]
    rows: list[list[Cell]]
    widths: list[ColumnWidth]
    columns_per_page: int

    @property
    def column_count(self) -> int:
        return len(self.widths) - 1

    @property
    def has_row_headers(self) -> bool:
        return self.orientation is HeaderOrientation.ROW


def page_ranges(column_count: int, columns_per_page: int) -> list[range]:
    """
    Split ``column_count`` columns into consecutive pages.

    Args:
        column_count: Total number of data columns
        columns_per_page: Maximum columns on one page

    Returns:
        One range of column indices per page, in order
    """
    page_count = math.ceil(column_count / columns_per_page)
    return [
        range(page * columns_per_page, min((page + 1) * columns_per_page, column_count))
        for page in range(page_count)
    ]


class PageRenderer:
    """Render a ``PageLayout`` as bordered text pages."""

    def __init__(self, glyphs: BorderGlyphs | None = None) -> None:
        self._glyphs = glyphs if glyphs is not None else BOX

    def render(self, layout: PageLayout) -> str:
        """
        Render every page of the layout.

        Args:
            layout: Table state to draw

        Returns:
            All pages, each line newline-terminated and each page followed
            by a blank line. Empty when the table has no columns.
        """
        pages = page_ranges(layout.column_count, layout.columns_per_page)
        logger.debug(
            "Rendering %d column(s) on %d page(s) of up to %d",
            layout.column_count,
            len(pages),
            layout.columns_per_page,
        )

        lines: list[str] = []
        for number, columns in enumerate(pages):
            lines.extend(self._render_page(layout, columns, first=number == 0))
            lines.append("")
        return "".join(line + "\n" for line in lines)

    def _render_page(self, layout: PageLayout, columns: range, first: bool) -> list[str]:
        g = self._glyphs
        widths = layout.widths
        lines: list[str] = []

        if first and layout.title:
            page_width = self._page_width(layout, columns)
            if len(layout.title) > page_width:
                self._fit_title(layout, columns)
                page_width = self._page_width(layout, columns)
            lines.append(g.top.left + self._repeat(g.horizontal, page_width) + g.top.right)
            lines.append(g.vertical + self._text(layout.title, page_width) + g.vertical)
            lines.append(self._line(layout, columns, g.title_separator))
        else:
            lines.append(self._line(layout, columns, g.top))

        if layout.orientation is HeaderOrientation.COLUMN:
            cells = [
                g.vertical + self._text(layout.headers[c], widths[c + 1].width) for c in columns
            ]
            lines.append("".join(cells) + g.vertical)
            lines.append(self._line(layout, columns, g.middle))

        for index, row in enumerate(layout.rows):
            cells = []
            if layout.has_row_headers:
                cells.append(g.vertical + self._text(layout.headers[index], widths[0].width))
            cells.extend(g.vertical + self._text(row[c].text, widths[c + 1].width) for c in columns)
            lines.append("".join(cells) + g.vertical)
            if index < len(layout.rows) - 1:
                lines.append(self._line(layout, columns, g.middle))

        lines.append(self._line(layout, columns, g.bottom))
        return lines

    def _fit_title(self, layout: PageLayout, columns: range) -> None:
        """
        Widen the visible columns so the title fits on the page.

        Every visible column gets an equal share of the title, never less
        than it already has. Columns are only widened, never narrowed to the
        share: for widths ``[10, 1]`` and a 13-character title the result is
        ``[10, 6]``, not ``[6, 6]``. The shared entries keep the new widths.
        """
        row_header = layout.widths[0].width if layout.has_row_headers else 0
        share = (len(layout.title) - row_header) // len(columns)
        for c in columns:
            entry = layout.widths[c + 1]
            entry.width = max(entry.width, share)
        logger.debug("Widened columns %d-%d to fit title", columns.start, columns.stop - 1)

    @staticmethod
    def _page_width(layout: PageLayout, columns: range) -> int:
        width = sum(layout.widths[c + 1].width for c in columns)
        if layout.has_row_headers:
            return width + layout.widths[0].width + len(columns)
        return width + len(columns) - 1

    def _line(self, layout: PageLayout, columns: range, line: BorderLine) -> str:
        g = self._glyphs
        segments = [self._repeat(g.horizontal, layout.widths[c + 1].width) for c in columns]
        if layout.has_row_headers:
            segments.insert(0, self._repeat(g.horizontal, layout.widths[0].width))
        return line.left + line.middle.join(segments) + line.right

    @staticmethod
    def _repeat(glyph: str, times: int) -> str:
        return glyph * times

    def _text(self, text: str, width: int) -> str:
        if not text:
            return self._repeat(self._glyphs.space, width)
        if len(text) < width:
            return text + self._repeat(self._glyphs.space, width - len(text))
        return text[:width]
