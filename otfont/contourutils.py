"""Helpers for working with TrueType contours."""

from __future__ import annotations

from itertools import pairwise

from otfont.point import Point


def _half(value: int) -> int:
    """Halve an integer, rounding towards zero."""
    return -((-value) // 2) if value < 0 else value // 2


def _midpoint(first: Point, second: Point) -> tuple[int, int]:
    return _half(first.x + second.x), _half(first.y + second.y)


def insert_explicit_oncurves(contour: list[Point]) -> list[Point]:
    """Return the contour with an on-curve point between every pair of adjacent off-curves."""
    if not contour:
        return []
    result: list[Point] = []
    for current, following in pairwise(contour):
        result.append(current)
        if not current.on_curve and not following.on_curve:
            x, y = _midpoint(current, following)
            result.append(Point(x, y, True))
    result.append(contour[-1])
    return result


def remove_implied_oncurves(contour: list[Point]) -> list[Point]:
    """Return the contour without on-curve points that lie midway between two off-curves."""
    points = list(contour)
    i = 0
    while i < len(points):
        this = points[i]
        prev = points[i - 1]
        nxt = points[(i + 1) % len(points)]
        if (
            this.on_curve
            and not prev.on_curve
            and not nxt.on_curve
            and (this.x, this.y) == _midpoint(prev, nxt)
        ):
            del points[i]
        else:
            i += 1
    return points


def contour_to_path(contour: list[Point]) -> list[tuple]:
    """Describe a contour as path operations.

    Each operation is a tuple: ``("moveTo", pt)``, ``("lineTo", pt)``,
    ``("qCurveTo", control, pt)`` or ``("closePath",)``, with points as
    ``(x, y)`` floats.
    """
    if not contour:
        raise ValueError("Cannot build a path from an empty contour")
    points = insert_explicit_oncurves(contour)

    def coords(point: Point) -> tuple[float, float]:
        return (float(point.x), float(point.y))

    start = points[0]
    path: list[tuple] = [("moveTo", coords(start))]
    segment: list[Point] = []
    for point in points[1:]:
        segment.append(point)
        if point.on_curve:
            if len(segment) == 1:
                path.append(("lineTo", coords(segment[0])))
            elif len(segment) == 2:
                path.append(("qCurveTo", coords(segment[0]), coords(segment[1])))
            segment = []
    if segment:
        path.append(("qCurveTo", coords(segment[0]), coords(start)))
    elif start.on_curve and points[-1].on_curve:
        path.append(("lineTo", coords(start)))
    path.append(("closePath",))
    return path