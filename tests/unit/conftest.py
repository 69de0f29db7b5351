"""Unit test fixtures for page-table."""

import pytest

from page_table import HeaderOrientation, PageTable
from page_table.config import BORDER_ENV_VAR, COLUMNS_PER_PAGE_ENV_VAR, STRICT_ENV_VAR


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for name in (COLUMNS_PER_PAGE_ENV_VAR, BORDER_ENV_VAR, STRICT_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def column_table() -> PageTable:
    """A 2x3 table with column headers and some content."""
    table = PageTable("", 0, 0, HeaderOrientation.COLUMN)
    table.add_header(["Item", "Qty", "Price"])
    table.add_row(["bolt", 120, "0.10"])
    table.add_row(["washer", 4, "0.02"])
    return table


@pytest.fixture
def demo_table() -> PageTable:
    """Nine columns, three rows, renamed row headers."""
    table = PageTable("01234567890123456789", 0, 9)
    table.set_header_orientation(HeaderOrientation.ROW)
    table.set_columns_for_page(9)
    table.add_row(list("ABCDEFGHI"))
    table.add_row(range(1, 10))
    table.add_row(list("NAAAABFFH"))
    table.update_header_at(0, "Vi")
    table.update_header_at(1, "Di")
    table.update_header_at(2, "Pi")
    return table
