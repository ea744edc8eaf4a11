"""Font metrics queries.

Width and position queries over a parsed font. Every path that needs a
character's advance (measurement, layout, mesh assembly and glyph
placement) goes through char_advance, so all of them agree on the
fallback for characters the font does not map:

- whitespace: a quarter of the font height (ascender - descender)
- anything else: zero
"""

from textmesh.domain import FontMetrics, GlyphMetrics
from textmesh.io.reader import Font

# Fraction of (ascender - descender) used as the advance of unmapped whitespace
WHITESPACE_ADVANCE_RATIO = 0.25


def font_metrics(font: Font) -> FontMetrics:
    """Font-wide vertical metrics."""
    return FontMetrics(
        ascender=font.ascender,
        descender=font.descender,
        line_gap=font.line_gap,
    )


def glyph_advance(font: Font, character: str) -> float | None:
    """Advance of a character, or None if the font maps no glyph for it."""
    return font.advance(character)


def glyph_metrics(font: Font, character: str) -> GlyphMetrics | None:
    """Advance and outline presence of a character's glyph.

    Returns:
        GlyphMetrics, or None if the font maps no glyph for the character
    """
    advance = font.advance(character)
    if advance is None:
        return None
    return GlyphMetrics(advance=advance, has_outline=bool(font.contours(character)))


def whitespace_fallback_advance(font: Font) -> float:
    """Advance used for whitespace the font does not map."""
    return WHITESPACE_ADVANCE_RATIO * (font.ascender - font.descender)


def char_advance(font: Font, character: str) -> float:
    """Advance of a character with the fallback rule applied."""
    advance = font.advance(character)
    if advance is not None:
        return advance
    if character.isspace():
        return whitespace_fallback_advance(font)
    return 0.0


def text_width(font: Font, text: str) -> float:
    """Sum of the advances of every character of text."""
    return sum((char_advance(font, ch) for ch in text), 0.0)


def char_positions(font: Font, text: str) -> list[tuple[int, float]]:
    """Pen position of every character.

    Returns:
        (character index, x offset) pairs, starting at (0, 0.0); empty for
        empty text
    """
    positions: list[tuple[int, float]] = []
    x = 0.0
    for index, ch in enumerate(text):
        positions.append((index, x))
        x += char_advance(font, ch)
    return positions


def measure(font: Font, text: str) -> tuple[float, list[tuple[int, float]]]:
    """Total width and per-character positions of text.

    Returns:
        (width, positions); (0.0, []) for empty text
    """
    return text_width(font, text), char_positions(font, text)
