"""Font I/O layer for textmesh.

This module handles reading fonts using fonttools and writing meshes.
It provides a clean abstraction layer between fonttools and the
domain models.

Key responsibilities:
- Hold raw font bytes keyed by handle (the font data source)
- Parse TTF/OTF fonts and expose metrics in em units
- Convert fonttools outlines to domain contours
- Write meshes as Wavefront OBJ

Key classes:
- FontAssets / FontAsset: Font bytes store
- Font: Parsed font handle
"""

from textmesh.io.assets import FontAsset, FontAssets
from textmesh.io.reader import Font
from textmesh.io.writer import write_obj, write_placements_obj

__all__ = [
    "Font",
    "FontAsset",
    "FontAssets",
    "write_obj",
    "write_placements_obj",
]
