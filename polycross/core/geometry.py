"""Segment intersection primitive.

The test is the classic parametric one: both segments are written as
``p + u * (q - p)`` and solved for the two parameters. A crossing is reported
only when both parameters fall inside the closed range [PARAM_MIN, PARAM_MAX],
so touching endpoints count as intersections.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence

from .constants import PARALLEL_TOLERANCE, PARAM_MIN, PARAM_MAX

__all__ = ['Point', 'find_intersection', 'intersect_segments']


class Point(NamedTuple):
    """Immutable 2D point."""
    x: float
    y: float


def _intersect(x1: float, y1: float, x2: float, y2: float,
               x3: float, y3: float, x4: float, y4: float) -> Optional[Point]:
    """Unchecked kernel shared by the public entry points and the polygon scan."""
    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    # Products of huge finite coordinates overflow to inf/nan
    if not math.isfinite(denominator) or abs(denominator) < PARALLEL_TOLERANCE:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator
    # Written so that NaN fails the range test
    if not (PARAM_MIN <= ua <= PARAM_MAX and PARAM_MIN <= ub <= PARAM_MAX):
        return None

    x = x1 + ua * (x2 - x1)
    y = y1 + ua * (y2 - y1)
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return Point(x, y)


def _checked_coords(values: Sequence[float]) -> tuple:
    for v in values:
        if isinstance(v, (str, bytes)):
            raise ValueError(f"segment coordinates must be numbers, got {v!r}")
    coords = tuple(float(v) for v in values)
    for c in coords:
        if not math.isfinite(c):
            raise ValueError(f"segment coordinates must be finite, got {c!r}")
    return coords


def _as_xy(p, name: str) -> tuple:
    try:
        n = len(p)
    except TypeError:
        raise ValueError(f"{name} must be a 2D point (x, y), got {type(p).__name__}") from None
    if n != 2:
        raise ValueError(f"{name} must have exactly 2 coordinates, got {n}")
    return p[0], p[1]


def intersect_segments(x1: float, y1: float, x2: float, y2: float,
                       x3: float, y3: float, x4: float, y4: float) -> Optional[Point]:
    """Intersect segment (x1,y1)-(x2,y2) with segment (x3,y3)-(x4,y4).

    Flat eight-scalar form of :func:`find_intersection`. Returns the crossing
    point or ``None`` when the segments are (numerically) parallel or the
    crossing of their supporting lines lies outside either segment.

    Raises ``ValueError`` if any coordinate is NaN or infinite.
    """
    return _intersect(*_checked_coords((x1, y1, x2, y2, x3, y3, x4, y4)))


def find_intersection(p1, p2, p3, p4) -> Optional[Point]:
    """Return the intersection of segment p1-p2 with segment p3-p4, or None.

    Each argument is any length-2 sequence (tuple, list, ndarray row, Point).
    """
    coords = (
        _as_xy(p1, 'p1') + _as_xy(p2, 'p2') + _as_xy(p3, 'p3') + _as_xy(p4, 'p4')
    )
    return _intersect(*_checked_coords(coords))
