"""Glyph mesh generation.

This module turns one character of a font into an extruded, indexed
triangle mesh in the glyph's local space:

1. Read the outline contours (em units) from the font
2. Flatten curves with a fixed number of segments per curve
3. Group contours into filled regions with holes
4. Triangulate each region's cap with earcut
5. Emit a front cap at z = 0, a back cap at z = -depth and side walls

Side walls get their own vertices per edge so every face has a flat normal.
"""

from collections.abc import Callable, Iterator

import mapbox_earcut
import numpy as np

from textmesh.core.geometry import flatten_contour
from textmesh.core.outline import FilledRegion, OutlineAnalyzer
from textmesh.domain import Contour, LocalGlyphMesh, Vec3
from textmesh.exceptions import GlyphError, MalformedOutlineError, NoOutlineError
from textmesh.io.reader import Font

# Signature shared by generate_glyph_mesh and test doubles
GlyphMeshGenerator = Callable[[Font, str, float, int], LocalGlyphMesh]

_FRONT_NORMAL: Vec3 = (0.0, 0.0, 1.0)
_BACK_NORMAL: Vec3 = (0.0, 0.0, -1.0)


class _MeshBuilder:
    """Accumulates vertices, normals and indices of one glyph."""

    def __init__(self) -> None:
        self.vertices: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.indices: list[int] = []

    def add_caps(self, ring_points: np.ndarray, triangles: np.ndarray, depth: float) -> None:
        """Add front and back caps for one triangulated region.

        Args:
            ring_points: (N, 2) array of region vertices
            triangles: (M, 3) array of counter-clockwise triangles
            depth: Extrusion depth
        """
        base = len(self.vertices)
        count = len(ring_points)
        xy = ring_points.tolist()

        self.vertices.extend((x, y, 0.0) for x, y in xy)
        self.normals.extend([_FRONT_NORMAL] * count)
        self.vertices.extend((x, y, -depth) for x, y in xy)
        self.normals.extend([_BACK_NORMAL] * count)

        self.indices.extend((triangles + base).ravel().tolist())
        # Back cap faces -Z, so its winding is reversed
        self.indices.extend((triangles[:, ::-1] + base + count).ravel().tolist())

    def add_walls(self, ring: np.ndarray, depth: float) -> None:
        """Add side walls along one closed ring.

        The ring must have the filled area on its left (counter-clockwise
        outers, clockwise holes), so the right-hand normal points outward.
        """
        count = len(ring)
        for k in range(count):
            ax, ay = ring[k]
            bx, by = ring[(k + 1) % count]
            dx, dy = bx - ax, by - ay
            length = float(np.hypot(dx, dy))
            if length == 0.0:
                continue
            normal = (float(dy / length), float(-dx / length), 0.0)

            base = len(self.vertices)
            self.vertices.extend([
                (float(ax), float(ay), 0.0),
                (float(bx), float(by), 0.0),
                (float(bx), float(by), -depth),
                (float(ax), float(ay), -depth),
            ])
            self.normals.extend([normal] * 4)
            self.indices.extend([base, base + 2, base + 1, base, base + 3, base + 2])


def _ring_array(contour: Contour, counter_clockwise: bool) -> np.ndarray:
    """Convert a flattened contour to an (N, 2) array with the given winding."""
    points = np.array([p.to_tuple() for p in contour.points], dtype=np.float64)
    if (contour.signed_area() > 0) != counter_clockwise:
        points = points[::-1]
    return points


def _triangulate(ring_points: np.ndarray, ring_ends: list[int]) -> np.ndarray:
    """Triangulate a region with earcut and orient every triangle CCW.

    Args:
        ring_points: (N, 2) array of all ring vertices, outer ring first
        ring_ends: End index (exclusive) of every ring

    Returns:
        (M, 3) array of vertex indices
    """
    result = mapbox_earcut.triangulate_float64(
        ring_points, np.asarray(ring_ends, dtype=np.uint32)
    )
    triangles = np.asarray(result, dtype=np.int64).reshape(-1, 3)
    if len(triangles) == 0:
        return triangles

    a = ring_points[triangles[:, 0]]
    b = ring_points[triangles[:, 1]]
    c = ring_points[triangles[:, 2]]
    cross = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    flip = cross < 0
    triangles[flip] = triangles[flip][:, ::-1]
    return triangles


def _add_region(
    builder: _MeshBuilder,
    region: FilledRegion,
    contours: list[Contour],
    depth: float,
    character: str,
) -> None:
    rings = [_ring_array(contours[region.outer], counter_clockwise=True)]
    rings.extend(_ring_array(contours[idx], counter_clockwise=False) for idx in region.holes)

    ring_ends: list[int] = []
    total = 0
    for ring in rings:
        total += len(ring)
        ring_ends.append(total)
    ring_points = np.vstack(rings)

    triangles = _triangulate(ring_points, ring_ends)
    if len(triangles) == 0:
        raise MalformedOutlineError(character, "triangulation produced no triangles")

    builder.add_caps(ring_points, triangles, depth)
    for ring in rings:
        builder.add_walls(ring, depth)


def generate_glyph_mesh(
    font: Font,
    character: str,
    depth: float,
    subdivision: int,
) -> LocalGlyphMesh:
    """Generate the extruded mesh of one character.

    Args:
        font: Parsed font
        character: Character to generate
        depth: Extrusion depth in em units
        subdivision: Straight segments per curve segment

    Returns:
        LocalGlyphMesh with the glyph origin at (0, 0, 0)

    Raises:
        NoOutlineError: If the character is whitespace, unmapped or draws nothing
        MalformedOutlineError: If the outline cannot be tessellated
    """
    if character.isspace() or font.glyph_name(character) is None:
        raise NoOutlineError(character)

    try:
        raw_contours = font.contours(character)
    except Exception as e:
        raise MalformedOutlineError(character, str(e)) from e
    if not raw_contours:
        raise NoOutlineError(character)

    contours = [flatten_contour(c, subdivision) for c in raw_contours]
    hierarchy = OutlineAnalyzer().analyze(contours)
    if not hierarchy.regions:
        raise MalformedOutlineError(character, "no contour encloses any area")

    builder = _MeshBuilder()
    for region in hierarchy.regions:
        _add_region(builder, region, contours, depth, character)

    return LocalGlyphMesh(
        vertices=builder.vertices,
        normals=builder.normals,
        indices=builder.indices,
        advance=font.advance(character) or 0.0,
    )


def generate_glyph_meshes(
    font: Font,
    text: str,
    depth: float,
    subdivision: int,
    generator: GlyphMeshGenerator = generate_glyph_mesh,
) -> Iterator[tuple[str, LocalGlyphMesh | None]]:
    """Generate the mesh of every character of a text independently.

    Useful for replacing the mesh of a single character outside a layout
    pass.

    Yields:
        (character, mesh) pairs; mesh is None where generation failed
    """
    for character in text:
        try:
            yield character, generator(font, character, depth, subdivision)
        except GlyphError:
            yield character, None
