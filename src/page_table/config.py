"""Environment-driven settings for page-table."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .glyphs import BorderGlyphs, get_glyphs
from .models import HeaderOrientation
from .table import DEFAULT_COLUMNS_PER_PAGE, MIN_COLUMNS_PER_PAGE, PageTable

COLUMNS_PER_PAGE_ENV_VAR = "PAGE_TABLE_COLUMNS_PER_PAGE"
"""Environment variable for the default number of columns per page."""

BORDER_ENV_VAR = "PAGE_TABLE_BORDER"
"""Environment variable selecting the border glyph set (``box`` or ``ascii``)."""

STRICT_ENV_VAR = "PAGE_TABLE_STRICT"
"""Environment variable enabling ``BoundsError`` on out-of-range indices."""

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class TableSettings:
    """Defaults applied to tables created through ``create_table``."""

    columns_per_page: int = DEFAULT_COLUMNS_PER_PAGE
    border: str = "box"
    strict: bool = False

    def __post_init__(self) -> None:
        if self.columns_per_page < MIN_COLUMNS_PER_PAGE:
            self.columns_per_page = MIN_COLUMNS_PER_PAGE
        # Fail early on an unknown glyph set name
        get_glyphs(self.border)

    @property
    def glyphs(self) -> BorderGlyphs:
        return get_glyphs(self.border)

    @classmethod
    def from_environment(cls) -> TableSettings:
        """
        Create TableSettings from environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        raw_columns = os.environ.get(COLUMNS_PER_PAGE_ENV_VAR, str(DEFAULT_COLUMNS_PER_PAGE))
        try:
            columns_per_page = int(raw_columns)
        except ValueError:
            raise ConfigurationError(
                COLUMNS_PER_PAGE_ENV_VAR, raw_columns, "Must be an integer."
            ) from None

        raw_strict = os.environ.get(STRICT_ENV_VAR, "").strip().lower()
        if raw_strict not in _TRUE_VALUES | _FALSE_VALUES:
            raise ConfigurationError(
                STRICT_ENV_VAR, raw_strict, "Must be one of 1/0, true/false, yes/no, on/off."
            )

        return cls(
            columns_per_page=columns_per_page,
            border=os.environ.get(BORDER_ENV_VAR, "box"),
            strict=raw_strict in _TRUE_VALUES,
        )

    def create_table(
        self,
        title: str = "",
        row_count: int = 0,
        column_count: int = 0,
        header_orientation: HeaderOrientation | str = HeaderOrientation.NONE,
    ) -> PageTable:
        """Create an empty table that uses these settings."""
        return PageTable(
            title,
            row_count,
            column_count,
            header_orientation,
            columns_per_page=self.columns_per_page,
            glyphs=self.glyphs,
            strict=self.strict,
        )
