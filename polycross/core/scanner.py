"""Polygon-vs-polygon intersection scan over flat coordinate sequences.

A polygon is a flat sequence ``[x0, y0, x1, y1, ...]``; consecutive vertices
form edges and the last vertex connects back to the first. The scan tests
every edge of the first polygon against every edge of the second, outer loop
over the first polygon, and reports each hit in that discovery order. No
pruning and no deduplication happen here.
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .constants import COORDS_PER_VERTEX, MIN_FLAT_POLYGON_LENGTH
from .geometry import Point, _intersect
from .logging_utils import get_logger

logger = get_logger('polycross.scanner')

__all__ = [
    'validate_flat_polygon', 'polygon_edges', 'find_all_intersections',
    'find_intersection_points', 'flatten_points', 'unflatten_points',
]


def validate_flat_polygon(values, name: str = 'vertices') -> np.ndarray:
    """Check a flat vertex sequence and return it as a float64 array.

    Raises ValueError when the input is not one-dimensional, has an odd
    number of values, has fewer than two vertices, holds NaN/inf, or holds
    strings (numeric text is not coerced).
    """
    try:
        raw = np.asarray(values)
        if raw.dtype.kind in 'USO' and any(isinstance(v, (str, bytes, np.str_, np.bytes_)) for v in raw.ravel()):
            raise TypeError(f"found text value of type {raw.dtype}")
        arr = np.array(raw, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a flat sequence of numbers: {exc}") from exc
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")
    n = arr.shape[0]
    if n % COORDS_PER_VERTEX:
        raise ValueError(f"{name} must have an even number of values (x, y pairs), got {n}")
    if n < MIN_FLAT_POLYGON_LENGTH:
        raise ValueError(
            f"{name} must hold at least {MIN_FLAT_POLYGON_LENGTH // COORDS_PER_VERTEX} vertices "
            f"({MIN_FLAT_POLYGON_LENGTH} values), got {n}"
        )
    if not np.all(np.isfinite(arr)):
        bad = int(np.flatnonzero(~np.isfinite(arr))[0])
        raise ValueError(f"{name} must contain only finite values; index {bad} is {arr[bad]!r}")
    return arr


def _edges(flat: List[float]) -> Iterator[Tuple[float, float, float, float]]:
    n = len(flat)
    for i in range(0, n, COORDS_PER_VERTEX):
        yield flat[i], flat[i + 1], flat[(i + 2) % n], flat[(i + 3) % n]


def polygon_edges(values) -> Iterator[Tuple[Point, Point]]:
    """Yield the closed polygon's edges as (start, end) points, in vertex order."""
    flat = validate_flat_polygon(values).tolist()
    for x1, y1, x2, y2 in _edges(flat):
        yield Point(x1, y1), Point(x2, y2)


def find_intersection_points(vertices_a, vertices_b) -> List[Point]:
    """Scan two closed polygons and return every edge-pair crossing as a Point.

    Points appear in (edge of A, edge of B) order. A point where several edge
    pairs meet, e.g. a shared vertex, is reported once per pair.
    """
    a = validate_flat_polygon(vertices_a, 'vertices_a').tolist()
    b = validate_flat_polygon(vertices_b, 'vertices_b').tolist()
    edges_b = list(_edges(b))

    hits: List[Point] = []
    for x1, y1, x2, y2 in _edges(a):
        for x3, y3, x4, y4 in edges_b:
            p = _intersect(x1, y1, x2, y2, x3, y3, x4, y4)
            if p is not None:
                hits.append(p)
    logger.debug("scanned %d x %d edges, %d intersection(s)",
                 len(a) // COORDS_PER_VERTEX, len(edges_b), len(hits))
    return hits


def find_all_intersections(vertices_a, vertices_b) -> List[float]:
    """Flat form of :func:`find_intersection_points`: ``[x0, y0, x1, y1, ...]``.

    Returns an empty list when no edges cross.
    """
    return flatten_points(find_intersection_points(vertices_a, vertices_b))


def flatten_points(points: Sequence[Sequence[float]]) -> List[float]:
    out: List[float] = []
    for x, y in points:
        out.append(x)
        out.append(y)
    return out


def unflatten_points(values) -> List[Point]:
    """Split a flat ``[x0, y0, ...]`` sequence into Points. An empty input is allowed."""
    flat = list(values)
    if len(flat) % COORDS_PER_VERTEX:
        raise ValueError(f"flat point sequence must have even length, got {len(flat)}")
    return [Point(float(flat[i]), float(flat[i + 1])) for i in range(0, len(flat), COORDS_PER_VERTEX)]
