"""
page-table: Paginated fixed-width text tables.

This library renders a grid of text cells as bordered tables with:
- Auto-fit or pinned column widths
- Column or row headers
- Horizontal pagination into blocks of a bounded number of columns
- A title bar that widens columns when it does not fit

Example:
    from page_table import HeaderOrientation, PageTable

    table = PageTable("Sensors", 0, 6, HeaderOrientation.ROW, columns_per_page=3)
    table.add_row([21.5, 22.0, 21.8, 22.4, 23.1, 22.9])
    table.add_row([True, True, False, True, True, True])
    table.update_header_at(0, "temp")
    table.update_header_at(1, "online")
    table.print()
"""

from importlib.metadata import PackageNotFoundError, version

from .config import TableSettings
from .exceptions import (
    BoundsError,
    ConfigurationError,
    ManifestError,
    PageTableError,
)
from .glyphs import ASCII, BOX, BorderGlyphs, BorderLine, get_glyphs
from .manifest import TableManifest, load_csv, load_manifest, load_yaml
from .models import Cell, CellValue, ColumnWidth, HeaderOrientation, to_cell_text
from .renderer import PageLayout, PageRenderer, page_ranges
from .table import PageTable

try:
    __version__ = version("page-table")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "PageTable",
    "PageRenderer",
    "PageLayout",
    "TableSettings",
    "TableManifest",
    # Models
    "Cell",
    "CellValue",
    "ColumnWidth",
    "HeaderOrientation",
    "to_cell_text",
    # Glyphs
    "BorderGlyphs",
    "BorderLine",
    "BOX",
    "ASCII",
    "get_glyphs",
    # Documents
    "load_manifest",
    "load_yaml",
    "load_csv",
    # Pagination
    "page_ranges",
    # Exceptions
    "PageTableError",
    "BoundsError",
    "ConfigurationError",
    "ManifestError",
]
