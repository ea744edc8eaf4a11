"""Internal Bezier curve sampling.

This is an internal module containing helper functions for flatten_contour.
Not intended for public use.
"""

from textmesh.domain import Point


def sample_quadratic(points: list[Point], segments: int) -> list[Point]:
    """Sample a quadratic Bezier curve at evenly spaced parameters.

    Args:
        points: List of 3 control points [p0, p1, p2]
        segments: Number of straight segments to produce (at least 1)

    Returns:
        segments + 1 points from p0 to p2 inclusive
    """
    p0, p1, p2 = points
    result = [Point(p0.x, p0.y)]

    for k in range(1, segments):
        t = k / segments
        u = 1.0 - t
        x = u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x
        y = u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y
        result.append(Point(x, y))

    result.append(Point(p2.x, p2.y))
    return result


def sample_cubic(points: list[Point], segments: int) -> list[Point]:
    """Sample a cubic Bezier curve at evenly spaced parameters.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        segments: Number of straight segments to produce (at least 1)

    Returns:
        segments + 1 points from p0 to p3 inclusive
    """
    p0, p1, p2, p3 = points
    result = [Point(p0.x, p0.y)]

    for k in range(1, segments):
        t = k / segments
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        x = a * p0.x + b * p1.x + c * p2.x + d * p3.x
        y = a * p0.y + b * p1.y + c * p2.y + d * p3.y
        result.append(Point(x, y))

    result.append(Point(p3.x, p3.y))
    return result
