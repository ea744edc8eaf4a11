"""Geometric operations on glyph outlines.

This module provides the 2D utilities used before tessellation:
- Signed area calculation (shoelace formula)
- Point-in-polygon testing (ray casting algorithm)
- Bezier curve sampling with a fixed subdivision count
- Contour flattening with implied TrueType on-curve points

All functions are pure and stateless.
"""

from textmesh.core._bezier import sample_cubic as _sample_cubic
from textmesh.core._bezier import sample_quadratic as _sample_quadratic
from textmesh.domain import Contour, Point, PointType

# Points closer than this (in em units) are merged while flattening
MERGE_EPSILON = 1e-9


def signed_area(points: list[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> p1 = Point(0.0, 0.0)
        >>> p2 = Point(1.0, 0.0)
        >>> p3 = Point(1.0, 1.0)
        >>> p4 = Point(0.0, 1.0)
        >>> signed_area([p1, p2, p3, p4])  # CCW square
        1.0
        >>> signed_area([p1, p4, p3, p2])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_in_polygon(point: Point, polygon: list[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting algorithm.

    Casts a horizontal ray from the point to the right and counts intersections
    with polygon edges. Odd number of intersections = inside, even = outside.

    Args:
        point: The point to test
        polygon: List of points forming the polygon boundary

    Returns:
        True if point is inside polygon, False otherwise

    Examples:
        >>> square = [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]
        >>> point_in_polygon(Point(1.0, 1.0), square)
        True
        >>> point_in_polygon(Point(3.0, 3.0), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    inside = False
    x, y = point.x, point.y
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        # Check if ray from point intersects edge (j, i)
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def bezier_points(points: list[Point], subdivisions: int) -> list[Point]:
    """Approximate a line or Bezier segment with straight segments.

    Args:
        points: Control points (2 for a line, 3 for quadratic, 4 for cubic)
        subdivisions: Straight segments per curve; values below 1 use 1

    Returns:
        Points from the first to the last control point inclusive

    Raises:
        ValueError: If points list is not of length 2, 3 or 4
    """
    segments = max(1, subdivisions)
    if len(points) == 2:
        return [Point(points[0].x, points[0].y), Point(points[1].x, points[1].y)]
    elif len(points) == 3:
        return _sample_quadratic(points, segments)
    elif len(points) == 4:
        return _sample_cubic(points, segments)
    else:
        raise ValueError(f"Expected 2-4 points for Bezier curve, got {len(points)}")


def _expand_implied_points(points: list[Point]) -> list[Point]:
    """Insert the implied on-curve midpoints between consecutive quadratic
    off-curve points (TrueType convention)."""
    n = len(points)
    expanded: list[Point] = []
    for i in range(n):
        curr = points[i]
        next_pt = points[(i + 1) % n]

        expanded.append(curr)

        if (
            curr.point_type == PointType.OFF_CURVE_QUAD
            and next_pt.point_type == PointType.OFF_CURVE_QUAD
        ):
            expanded.append(
                Point((curr.x + next_pt.x) / 2, (curr.y + next_pt.y) / 2, PointType.ON_CURVE)
            )
    return expanded


def flatten_contour(contour: Contour, subdivisions: int) -> Contour:
    """Replace every curve of a closed contour with straight segments.

    Args:
        contour: Contour possibly containing off-curve control points
        subdivisions: Straight segments per curve segment

    Returns:
        A contour of on-curve points only, without a repeated closing point
        and without consecutive duplicates. May have fewer than 3 points for
        degenerate input.
    """
    expanded = _expand_implied_points(contour.points)
    n = len(expanded)

    start = next(
        (i for i, p in enumerate(expanded) if p.point_type == PointType.ON_CURVE), None
    )
    if start is None:
        return Contour(points=[])

    # Rotate so the walk starts on an on-curve point
    ring = expanded[start:] + expanded[:start]

    flat: list[Point] = []
    i = 0
    while i < n:
        segment = [ring[i]]
        j = i + 1
        while j < n and ring[j].point_type != PointType.ON_CURVE:
            segment.append(ring[j])
            j += 1
        segment.append(ring[j % n])

        if len(segment) > 4:
            # Malformed control sequence; keep only its end points
            segment = [segment[0], segment[-1]]

        flat.extend(bezier_points(segment, subdivisions)[:-1])
        i = j

    deduped: list[Point] = []
    for p in flat:
        if deduped and _same_point(deduped[-1], p):
            continue
        deduped.append(p)
    while len(deduped) > 1 and _same_point(deduped[0], deduped[-1]):
        deduped.pop()

    return Contour(points=deduped)


def _same_point(a: Point, b: Point) -> bool:
    return abs(a.x - b.x) <= MERGE_EPSILON and abs(a.y - b.y) <= MERGE_EPSILON
