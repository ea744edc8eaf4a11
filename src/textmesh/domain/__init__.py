"""Domain models for textmesh.

This module contains the core domain models representing glyph outlines,
font metrics, meshes and layout results. All models are:

- Plain dataclasses, immutable where possible
- Independent of fonttools implementation details

Key classes:
- Point, Contour: Glyph outline geometry
- FontMetrics, GlyphMetrics: Font and glyph measurements
- LocalGlyphMesh, CombinedMesh, BoundingBox: Mesh output
- LayoutCursor, LineLayout, GlyphPlacement: Layout output
"""

from textmesh.domain.contour import Contour, Point, PointType
from textmesh.domain.layout import GlyphPlacement, LayoutCursor, LineLayout
from textmesh.domain.mesh import BoundingBox, CombinedMesh, LocalGlyphMesh, Vec3
from textmesh.domain.metrics import FontMetrics, GlyphMetrics

__all__: list[str] = [
    # Enums
    "PointType",
    # Outline types
    "Point",
    "Contour",
    # Metrics
    "FontMetrics",
    "GlyphMetrics",
    # Meshes
    "Vec3",
    "BoundingBox",
    "LocalGlyphMesh",
    "CombinedMesh",
    # Layout
    "LayoutCursor",
    "LineLayout",
    "GlyphPlacement",
]
