"""Font and glyph metrics.

All values are in em units, i.e. font units divided by the font's
units per em.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FontMetrics:
    """Font-wide vertical metrics.

    Attributes:
        ascender: Distance from baseline to the top of the tallest glyphs
        descender: Distance from baseline to the bottom of descenders (negative)
        line_gap: Extra spacing the font recommends between lines
    """

    ascender: float
    descender: float
    line_gap: float

    @property
    def height(self) -> float:
        """Total glyph height, ascender minus descender."""
        return self.ascender - self.descender

    @property
    def line_height(self) -> float:
        """Baseline-to-baseline distance between consecutive lines."""
        return self.ascender - self.descender + self.line_gap


@dataclass(frozen=True)
class GlyphMetrics:
    """Metrics for a single mapped glyph.

    Attributes:
        advance: Horizontal advance width
        has_outline: False for glyphs that draw nothing (spaces, zero-width marks)
    """

    advance: float
    has_outline: bool
