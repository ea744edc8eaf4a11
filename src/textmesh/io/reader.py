"""Parsed font handle.

This module provides the Font class, a read-only view over a fonttools
TTFont exposing the metrics and outlines the layout engine needs, in em
units.
"""

import io
from pathlib import Path

from fontTools.ttLib import TTFont

from textmesh.domain.contour import Contour
from textmesh.exceptions import FontLoadError, FontParseError
from textmesh.io.converter import fonttools_glyph_to_contours


class Font:
    """A parsed TTF/OTF font.

    All lengths are returned in em units (font units divided by units per
    em). Vertical metrics are read once at construction and do not change
    for the lifetime of the handle.

    Example:
        with Font.from_path(Path("font.ttf")) as font:
            print(font.ascender, font.advance("A"))
    """

    def __init__(self, ttfont: TTFont, name: str = "<memory>") -> None:
        """Wrap an already loaded TTFont.

        Args:
            ttfont: fonttools font object
            name: Identifier used in error messages

        Raises:
            FontParseError: If required tables are missing or corrupt
        """
        self.name = name
        self._font = ttfont

        try:
            upm = int(ttfont["head"].unitsPerEm)  # type: ignore[attr-defined]
            hhea = ttfont["hhea"]
            self._hmtx = ttfont["hmtx"]
            self._cmap: dict[int, str] = ttfont.getBestCmap() or {}
            self._glyph_set = ttfont.getGlyphSet()
        except Exception as e:
            raise FontParseError(name, str(e)) from e

        if upm <= 0:
            raise FontParseError(name, f"invalid unitsPerEm {upm}")

        self._scale = 1.0 / upm
        self._units_per_em = upm
        self._ascender = hhea.ascent * self._scale  # type: ignore[attr-defined]
        self._descender = hhea.descent * self._scale  # type: ignore[attr-defined]
        self._line_gap = hhea.lineGap * self._scale  # type: ignore[attr-defined]

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<memory>") -> "Font":
        """Parse a font from raw bytes.

        Args:
            data: Complete TTF/OTF file contents
            name: Identifier used in error messages

        Returns:
            Parsed Font

        Raises:
            FontParseError: If the bytes are not a usable font
        """
        try:
            ttfont = TTFont(io.BytesIO(data))
        except Exception as e:
            raise FontParseError(name, str(e)) from e
        return cls(ttfont, name=name)

    @classmethod
    def from_path(cls, path: Path) -> "Font":
        """Read and parse a font file.

        Raises:
            FontLoadError: If the file cannot be read
            FontParseError: If the file is not a usable font
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(path), str(e)) from e
        return cls.from_bytes(data, name=str(path))

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-flavoured fonts, otherwise 'TrueType'."""
        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Font units per em."""
        return self._units_per_em

    @property
    def glyph_count(self) -> int:
        """Total number of glyphs in the font."""
        return len(self._font.getGlyphOrder())

    @property
    def ascender(self) -> float:
        return self._ascender

    @property
    def descender(self) -> float:
        return self._descender

    @property
    def line_gap(self) -> float:
        return self._line_gap

    def glyph_name(self, character: str) -> str | None:
        """Name of the glyph mapped to a character, or None if unmapped."""
        return self._cmap.get(ord(character))

    def advance(self, character: str) -> float | None:
        """Advance width of a character's glyph, or None if unmapped."""
        name = self.glyph_name(character)
        if name is None:
            return None
        metrics = self._hmtx.metrics.get(name)  # type: ignore[attr-defined]
        if metrics is None:
            return None
        return metrics[0] * self._scale

    def contours(self, character: str) -> list[Contour]:
        """Outline contours of a character's glyph in em units.

        Returns:
            Contours, empty if the character is unmapped or draws nothing
        """
        name = self.glyph_name(character)
        if name is None or name not in self._glyph_set:
            return []
        return fonttools_glyph_to_contours(
            self._glyph_set[name], glyph_set=self._glyph_set, scale=self._scale
        )

    def close(self) -> None:
        """Close the underlying font and free resources."""
        self._font.close()

    def __enter__(self) -> "Font":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
