"""Core geometric types for glyph outline representation.

This module defines the fundamental 2D types used to describe glyph outlines:
- Point: A 2D point with curve type information
- PointType: Enum for point type on a curve
- Contour: A closed contour representing a shape boundary
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class PointType(Enum):
    """Point type on a contour.

    Points can be:
    - ON_CURVE: Point on the actual curve
    - OFF_CURVE_QUAD: Quadratic Bezier control point (TrueType)
    - OFF_CURVE_CUBIC: Cubic Bezier control point (PostScript/CFF)
    """

    ON_CURVE = auto()
    OFF_CURVE_QUAD = auto()
    OFF_CURVE_CUBIC = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Attributes:
        x: X coordinate
        y: Y coordinate
        point_type: Type of point (on-curve or control point)
    """

    x: float
    y: float
    point_type: PointType = PointType.ON_CURVE

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def scaled(self, factor: float) -> "Point":
        """Return this point with both coordinates multiplied by factor."""
        return Point(self.x * factor, self.y * factor, self.point_type)


@dataclass
class Contour:
    """A closed contour representing a shape boundary.

    A contour is a sequence of points that form a closed shape. Before
    flattening it may contain off-curve control points; after flattening
    every point is on-curve.

    Attributes:
        points: List of points forming the contour
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False)
    _cached_bbox: tuple[float, float, float, float] | None = field(
        default=None, repr=False, init=False
    )

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The sign of the area indicates winding direction:
        - Positive area: counter-clockwise winding
        - Negative area: clockwise winding

        Result is cached for efficiency.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        self._cached_area = area / 2.0
        return self._cached_area

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Result is cached for efficiency.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.points:
            self._cached_bbox = (0.0, 0.0, 0.0, 0.0)
            return self._cached_bbox

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def is_flat(self) -> bool:
        """Check whether every point of the contour is on-curve."""
        return all(p.point_type == PointType.ON_CURVE for p in self.points)
