"""
Border glyph sets.

The default ``BOX`` set is the single-line box-drawing set that code
page 437 consoles render for bytes 218/194/191 (top), 195/197/180
(middle), 192/193/217 (bottom), 179 (vertical) and 196 (horizontal).
``ASCII`` is a plain fallback for sinks that cannot show those glyphs;
its top, middle and bottom rows stay distinguishable (``.``, ``+``, ``'``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class BorderLine:
    """Left, junction and right glyphs of one horizontal border row."""

    left: str
    middle: str
    right: str


@dataclass(frozen=True)
class BorderGlyphs:
    """Complete glyph set used to frame a page."""

    top: BorderLine
    middle: BorderLine
    bottom: BorderLine
    vertical: str
    horizontal: str
    space: str = " "

    @property
    def title_separator(self) -> BorderLine:
        """Row between the title bar and the first column row.

        The title bar has no column junctions above it, so the columns
        open downward from a middle-style edge.
        """
        return BorderLine(self.middle.left, self.top.middle, self.middle.right)


BOX = BorderGlyphs(
    top=BorderLine("┌", "┬", "┐"),
    middle=BorderLine("├", "┼", "┤"),
    bottom=BorderLine("└", "┴", "┘"),
    vertical="│",
    horizontal="─",
)

ASCII = BorderGlyphs(
    top=BorderLine(".", ".", "."),
    middle=BorderLine("+", "+", "+"),
    bottom=BorderLine("'", "'", "'"),
    vertical="|",
    horizontal="-",
)

GLYPH_SETS: dict[str, BorderGlyphs] = {
    "box": BOX,
    "ascii": ASCII,
}


def get_glyphs(name: str) -> BorderGlyphs:
    """
    Look up a glyph set by name.

    Args:
        name: ``box`` or ``ascii`` (case-insensitive)

    Returns:
        The matching glyph set

    Raises:
        ConfigurationError: If no set has that name
    """
    key = name.strip().lower()
    if key not in GLYPH_SETS:
        raise ConfigurationError(
            "border",
            name,
            f"Expected one of: {', '.join(sorted(GLYPH_SETS))}",
        )
    return GLYPH_SETS[key]
