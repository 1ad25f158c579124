"""Contour points and two-dimensional affine transformations."""

from __future__ import annotations

import math
from dataclasses import dataclass

_INT16_MIN = -0x8000
_INT16_MAX = 0x7FFF


def _to_int16(value: float) -> int:
    """Truncate towards zero, saturating at the int16 limits (NaN becomes 0)."""
    if math.isnan(value):
        return 0
    if value >= _INT16_MAX:
        return _INT16_MAX
    if value <= _INT16_MIN:
        return _INT16_MIN
    return int(value)


@dataclass(frozen=True)
class Affine:
    """An affine transform with coefficients ``[a, b, c, d, e, f]``.

    A point ``(x, y)`` maps to ``(a*x + c*y + e, b*x + d*y + f)``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Transform the point ``(x, y)``."""
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def transform_rect_bbox(self, rect):
        """Return the bounding box ``(x_min, y_min, x_max, y_max)`` of a transformed rectangle."""
        x0, y0, x1, y1 = rect
        corners = [self.apply(x, y) for x in (x0, x1) for y in (y0, y1)]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return (min(xs), min(ys), max(xs), max(ys))

    def __mul__(self, other: Affine) -> Affine:
        if not isinstance(other, Affine):
            return NotImplemented
        return Affine(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )


@dataclass(frozen=True)
class Point:
    """A point on a glyph contour."""

    x: int
    y: int
    on_curve: bool

    def transform(self, affine: Affine) -> Point:
        """Return this point moved by ``affine``, with coordinates truncated to int16."""
        x, y = affine.apply(self.x, self.y)
        return Point(_to_int16(x), _to_int16(y), self.on_curve)