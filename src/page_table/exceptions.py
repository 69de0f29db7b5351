"""Exceptions for page-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class PageTableError(Exception):
    """
    Base exception for all page-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Grid Exceptions
# ---------------------------------------------------------------------------


class BoundsError(PageTableError, IndexError):
    """
    Raised for an out-of-range row, column or header index.

    Only raised by tables created with ``strict=True``. The default
    behaviour ignores such calls silently.
    """

    def __init__(self, kind: str, index: int, limit: int) -> None:
        self.kind = kind
        self.index = index
        self.limit = limit
        super().__init__(f"{kind} index {index} out of range (count: {limit})")


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(PageTableError):
    """Raised when a setting or option has an invalid value."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {value!r}. {reason}")


class ManifestError(PageTableError):
    """
    Raised when a table document cannot be turned into a table.

    This covers unreadable YAML/CSV as well as well-formed documents
    with the wrong shape (e.g. ``rows`` that is not a list of lists).
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid table document {source}: {reason}")
