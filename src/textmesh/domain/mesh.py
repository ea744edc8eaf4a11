"""Triangle mesh types.

This module defines the mesh domain models produced by the layout passes:
- LocalGlyphMesh: One glyph in its own local space
- CombinedMesh: All glyphs of a text merged into one indexed mesh
- BoundingBox: Axis-aligned bounds of emitted vertices
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box.

    Attributes:
        min: Minimum corner
        max: Maximum corner
    """

    min: Vec3
    max: Vec3

    @property
    def size(self) -> Vec3:
        """Extent along each axis."""
        return (
            self.max[0] - self.min[0],
            self.max[1] - self.min[1],
            self.max[2] - self.min[2],
        )

    @property
    def center(self) -> Vec3:
        """Midpoint of the box."""
        sx, sy, sz = self.size
        return (
            self.min[0] + sx * 0.5,
            self.min[1] + sy * 0.5,
            self.min[2] + sz * 0.5,
        )

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> "BoundingBox | None":
        """Fold points into a bounding box.

        Args:
            points: Points to enclose

        Returns:
            BoundingBox, or None if no points were given
        """
        iterator = iter(points)
        first = next(iterator, None)
        if first is None:
            return None

        min_x, min_y, min_z = first
        max_x, max_y, max_z = first
        for x, y, z in iterator:
            min_x, min_y, min_z = min(min_x, x), min(min_y, y), min(min_z, z)
            max_x, max_y, max_z = max(max_x, x), max(max_y, y), max(max_z, z)

        return cls(min=(min_x, min_y, min_z), max=(max_x, max_y, max_z))


@dataclass
class LocalGlyphMesh:
    """Triangle mesh of a single glyph in its local space.

    The glyph origin sits on the baseline at the left edge of the glyph's
    advance box.

    Attributes:
        vertices: Vertex positions
        normals: One normal per vertex
        indices: Flat triangle list, three indices per triangle
        advance: Horizontal advance of the glyph
    """

    vertices: list[Vec3]
    normals: list[Vec3]
    indices: list[int]
    advance: float = 0.0

    @property
    def triangle_count(self) -> int:
        """Number of triangles in the mesh."""
        return len(self.indices) // 3

    def is_valid(self) -> bool:
        """Check that normals match vertices and every index is in range."""
        if len(self.normals) != len(self.vertices):
            return False
        if len(self.indices) % 3 != 0:
            return False
        count = len(self.vertices)
        return all(0 <= i < count for i in self.indices)


@dataclass
class CombinedMesh:
    """All glyphs of a text merged into one indexed triangle mesh.

    Attributes:
        vertices: Vertex positions
        normals: One normal per vertex
        indices: Flat triangle list referencing vertices
    """

    vertices: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True if the mesh has no vertices."""
        return not self.vertices

    @property
    def triangle_count(self) -> int:
        """Number of triangles in the mesh."""
        return len(self.indices) // 3

    def bounding_box(self) -> BoundingBox | None:
        """Bounds of all vertices, or None for an empty mesh."""
        return BoundingBox.from_points(self.vertices)

    def translated(self, offset: Vec3) -> "CombinedMesh":
        """Return a copy with every vertex moved by offset.

        Normals and indices are shared unchanged.
        """
        ox, oy, oz = offset
        return CombinedMesh(
            vertices=[(x + ox, y + oy, z + oz) for x, y, z in self.vertices],
            normals=list(self.normals),
            indices=list(self.indices),
        )
