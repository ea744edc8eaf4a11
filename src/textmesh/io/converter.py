"""Converters between fonttools and domain models.

This module turns fonttools glyph outlines into domain Contour objects.
"""

from typing import Any

from fontTools.pens.basePen import decomposeSuperBezierSegment
from fontTools.pens.recordingPen import DecomposingRecordingPen, RecordingPen

from textmesh.domain.contour import Contour, Point, PointType


def fonttools_glyph_to_contours(
    fonttools_glyph: Any, glyph_set: Any = None, scale: float = 1.0
) -> list[Contour]:
    """Convert a fonttools glyph outline to domain contours.

    Handles both TrueType (quadratic curves) and OpenType/CFF (cubic curves).
    Uses a RecordingPen to extract the glyph outline as a series of
    drawing commands, then converts these to Contour objects. When the
    glyph set is given, composite glyphs are decomposed into the outlines
    of their components while drawing.

    Args:
        fonttools_glyph: The fonttools glyph object from a GlyphSet
        glyph_set: GlyphSet the glyph belongs to, used to resolve components
        scale: Factor applied to every coordinate (1 / unitsPerEm for em units)

    Returns:
        List of contours, possibly empty for glyphs that draw nothing
    """
    if glyph_set is not None:
        pen: RecordingPen = DecomposingRecordingPen(glyph_set, reverseFlipped=True)
    else:
        pen = RecordingPen()
    fonttools_glyph.draw(pen)

    contours = _recording_to_contours(pen.value)
    if scale != 1.0:
        contours = [Contour(points=[p.scaled(scale) for p in c.points]) for c in contours]
    return contours


def _recording_to_contours(recording: list[tuple[str, tuple[Any, ...]]]) -> list[Contour]:
    """Convert RecordingPen recording to list of Contour objects.

    The RecordingPen records drawing commands like:
    - ('moveTo', ((x, y),))
    - ('lineTo', ((x, y),))
    - ('qCurveTo', ((x1, y1), (x2, y2), ...))  # Quadratic
    - ('curveTo', ((x1, y1), (x2, y2), (x3, y3)))  # Cubic, or a superbezier
    - ('closePath', ())

    A qCurveTo whose last point is None describes a closed contour made only
    of off-curve points.

    Args:
        recording: List of drawing commands from RecordingPen

    Returns:
        List of Contour objects
    """
    contours: list[Contour] = []
    current_points: list[Point] = []

    for command, args in recording:
        if command == "moveTo":
            if current_points:
                contours.append(Contour(points=current_points))
                current_points = []

            x, y = args[0]
            current_points.append(Point(x, y, PointType.ON_CURVE))

        elif command == "lineTo":
            x, y = args[0]
            current_points.append(Point(x, y, PointType.ON_CURVE))

        elif command == "qCurveTo":
            for i, pt in enumerate(args):
                if pt is None:
                    continue
                x, y = pt
                if i < len(args) - 1:
                    current_points.append(Point(x, y, PointType.OFF_CURVE_QUAD))
                else:
                    current_points.append(Point(x, y, PointType.ON_CURVE))

        elif command == "curveTo":
            if len(args) == 1:
                x, y = args[0]
                current_points.append(Point(x, y, PointType.ON_CURVE))
            elif len(args) == 2:
                (x1, y1), (x2, y2) = args
                current_points.append(Point(x1, y1, PointType.OFF_CURVE_QUAD))
                current_points.append(Point(x2, y2, PointType.ON_CURVE))
            else:
                # More than two off-curve points is a "superbezier"
                segments = [tuple(args)] if len(args) == 3 else decomposeSuperBezierSegment(args)
                for (x1, y1), (x2, y2), (x3, y3) in segments:
                    current_points.append(Point(x1, y1, PointType.OFF_CURVE_CUBIC))
                    current_points.append(Point(x2, y2, PointType.OFF_CURVE_CUBIC))
                    current_points.append(Point(x3, y3, PointType.ON_CURVE))

        elif command == "closePath" or command == "endPath":
            if current_points:
                contours.append(Contour(points=current_points))
                current_points = []

    if current_points:
        contours.append(Contour(points=current_points))

    return contours
