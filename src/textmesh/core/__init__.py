"""Core layout algorithms for textmesh.

This module contains the core algorithms for:

- Font metrics queries (advances, text width, character positions)
- Line layout (line splitting, justification, vertical stacking)
- Glyph mesh generation (curve flattening, hole detection, extrusion)
- Mesh assembly (merging, bounding box, anchoring)
- Per-glyph placement planning
- Change-driven recomputation of registered text sources

Layout functions are pure over (font, text, style): they keep no state
between calls.

Key functions:
- measure: Width and per-character positions of a text
- layout_combined: Lay out a text as one anchored mesh
- layout_placements: Lay out a text as positioned per-glyph meshes
- generate_glyph_mesh: Extrude a single character

Key classes:
- MeshAssembler: Merges glyph meshes into one indexed buffer
- OutlineAnalyzer: Groups contours into filled regions and holes
- TextMeshSystem: Keeps the output of text sources up to date
"""

from textmesh.core.assembler import MeshAssembler, anchor_offset, layout_combined
from textmesh.core.geometry import flatten_contour, point_in_polygon, signed_area
from textmesh.core.layout import justify_offset, layout_lines, layout_text
from textmesh.core.metrics import (
    char_advance,
    char_positions,
    font_metrics,
    glyph_advance,
    glyph_metrics,
    measure,
    text_width,
)
from textmesh.core.outline import OutlineAnalyzer, OutlineHierarchy
from textmesh.core.placement import layout_placements
from textmesh.core.system import TextMeshGlyphsSource, TextMeshSource, TextMeshSystem
from textmesh.core.tessellator import (
    GlyphMeshGenerator,
    generate_glyph_mesh,
    generate_glyph_meshes,
)

__all__ = [
    # Generator
    "GlyphMeshGenerator",
    # Assembly
    "MeshAssembler",
    # Outline analysis
    "OutlineAnalyzer",
    "OutlineHierarchy",
    # Update system
    "TextMeshGlyphsSource",
    "TextMeshSource",
    "TextMeshSystem",
    "anchor_offset",
    # Metrics
    "char_advance",
    "char_positions",
    # Geometry functions
    "flatten_contour",
    "font_metrics",
    "generate_glyph_mesh",
    "generate_glyph_meshes",
    "glyph_advance",
    "glyph_metrics",
    # Layout
    "justify_offset",
    "layout_combined",
    "layout_lines",
    "layout_placements",
    "layout_text",
    "measure",
    "point_in_polygon",
    "signed_area",
    "text_width",
]
