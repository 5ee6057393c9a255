"""Array backends for the polygon intersection scan.

Both backends evaluate the same full edge cross product as
:func:`polycross.core.scanner.find_all_intersections`, with the same
floating-point expressions in the same order, so their output is identical to
the pure-Python scan (values and ordering). They only pay off once the
polygons have a few dozen edges.

- ``numpy``: broadcasting over an (n_a, n_b) grid of edge pairs.
- ``numba``: a JIT-compiled double loop writing into a preallocated buffer.
"""
from __future__ import annotations

import math
from typing import List

import numpy as np
from numba import njit

from .constants import COORDS_PER_VERTEX, PARALLEL_TOLERANCE, PARAM_MIN, PARAM_MAX
from .logging_utils import get_logger
from .scanner import validate_flat_polygon

logger = get_logger('polycross.vectorized')

BACKENDS = ('numpy', 'numba')

__all__ = ['BACKENDS', 'polygon_edge_array', 'scan_edges_numpy', 'scan_edges_numba',
           'find_all_intersections_vectorized']


def polygon_edge_array(flat: np.ndarray) -> np.ndarray:
    """Return an (n, 4) array of closed-polygon edges ``[x1, y1, x2, y2]``.

    Row i joins vertex i to vertex (i + 1) mod n.
    """
    starts = np.asarray(flat, dtype=np.float64).reshape(-1, COORDS_PER_VERTEX)
    ends = np.roll(starts, -1, axis=0)
    return np.ascontiguousarray(np.hstack([starts, ends]))


def scan_edges_numpy(edges_a: np.ndarray, edges_b: np.ndarray) -> np.ndarray:
    """Intersect every row of edges_a with every row of edges_b.

    Returns an (k, 2) array of hits in row-major (a, b) order.
    """
    x1 = edges_a[:, 0][:, None]; y1 = edges_a[:, 1][:, None]
    x2 = edges_a[:, 2][:, None]; y2 = edges_a[:, 3][:, None]
    x3 = edges_b[:, 0][None, :]; y3 = edges_b[:, 1][None, :]
    x4 = edges_b[:, 2][None, :]; y4 = edges_b[:, 3][None, :]

    # Parallel pairs divide by ~0 and huge coordinates overflow; both are masked out below
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
        valid = np.isfinite(denominator) & (np.abs(denominator) >= PARALLEL_TOLERANCE)
        ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
        ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator
        hit = (valid
               & (ua >= PARAM_MIN) & (ua <= PARAM_MAX)
               & (ub >= PARAM_MIN) & (ub <= PARAM_MAX))
        x = x1 + ua * (x2 - x1)
        y = y1 + ua * (y2 - y1)
        hit &= np.isfinite(x) & np.isfinite(y)
    return np.column_stack((x[hit], y[hit]))


@njit(cache=True)
def scan_edges_numba(edges_a, edges_b):
    """Numba double loop over edge pairs; same contract as scan_edges_numpy."""
    na = edges_a.shape[0]
    nb = edges_b.shape[0]
    out = np.empty((na * nb, 2), dtype=np.float64)
    count = 0
    for i in range(na):
        x1 = edges_a[i, 0]; y1 = edges_a[i, 1]
        x2 = edges_a[i, 2]; y2 = edges_a[i, 3]
        for j in range(nb):
            x3 = edges_b[j, 0]; y3 = edges_b[j, 1]
            x4 = edges_b[j, 2]; y4 = edges_b[j, 3]
            denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
            if not math.isfinite(denominator) or abs(denominator) < PARALLEL_TOLERANCE:
                continue
            ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
            ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator
            if not (PARAM_MIN <= ua <= PARAM_MAX and PARAM_MIN <= ub <= PARAM_MAX):
                continue
            x = x1 + ua * (x2 - x1)
            y = y1 + ua * (y2 - y1)
            if not (math.isfinite(x) and math.isfinite(y)):
                continue
            out[count, 0] = x
            out[count, 1] = y
            count += 1
    return out[:count]


def find_all_intersections_vectorized(vertices_a, vertices_b, backend: str = 'numpy') -> List[float]:
    """Array-backed equivalent of ``find_all_intersections``.

    Returns a flat Python list ``[x0, y0, x1, y1, ...]``.
    """
    if backend not in BACKENDS:
        raise ValueError(f"unknown backend '{backend}', expected one of {BACKENDS}")
    edges_a = polygon_edge_array(validate_flat_polygon(vertices_a, 'vertices_a'))
    edges_b = polygon_edge_array(validate_flat_polygon(vertices_b, 'vertices_b'))
    if backend == 'numba':
        hits = scan_edges_numba(edges_a, edges_b)
    else:
        hits = scan_edges_numpy(edges_a, edges_b)
    logger.debug("%s backend: %d x %d edges, %d intersection(s)",
                 backend, edges_a.shape[0], edges_b.shape[0], hits.shape[0])
    return hits.ravel().tolist()
