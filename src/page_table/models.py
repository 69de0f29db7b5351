"""Core models for page-table."""

from dataclasses import dataclass
from enum import Enum

CellValue = str | int | float | bool | None
"""Scalar kinds accepted as cell content."""


class HeaderOrientation(Enum):
    """Whether header labels run across columns, down rows, or are absent."""

    COLUMN = "column"
    ROW = "row"
    NONE = "none"

    @classmethod
    def parse(cls, value: "str | HeaderOrientation") -> "HeaderOrientation":
        """Resolve an orientation from its name, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown header orientation: {value!r} "
                f"(expected one of: {', '.join(o.value for o in cls)})"
            ) from None


def to_cell_text(value: CellValue) -> str:
    """
    Convert a scalar to the text stored in a cell.

    Booleans become ``true``/``false``, integers their decimal form and
    floats a fixed six-decimal form (``1.5`` -> ``1.500000``). Strings,
    single characters included, are stored as-is; ``None`` clears the cell.

    Args:
        value: Value to convert

    Returns:
        Canonical text for the value

    Raises:
        TypeError: If the value is not one of the supported scalar kinds
    """
    if value is None:
        return ""
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.6f}"
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported cell value type: {type(value).__name__}")


@dataclass
class Cell:
    """A single textual value owned by its row."""

    text: str = ""

    def assign(self, value: CellValue) -> int:
        """Store the canonical text of ``value`` and return its length."""
        self.text = to_cell_text(value)
        return len(self.text)


@dataclass
class ColumnWidth:
    """
    Width state of one column.

    Attributes:
        width: Rendered width in characters
        pinned: True when the width was fixed by the caller and no longer
            grows with content
    """

    width: int = 0
    pinned: bool = False
