"""Numeric policy constants for segment and polygon intersection.

These are the only numerical judgment calls the intersection code makes, so
they live here under names instead of as literals scattered across modules.
"""
from __future__ import annotations

# Segment intersection tolerances
PARALLEL_TOLERANCE: float = 1e-10  # |denominator| below this => parallel / collinear
PARAM_MIN: float = 0.0             # inclusive lower bound of the parametric position
PARAM_MAX: float = 1.0             # inclusive upper bound of the parametric position

# Flat coordinate layout
COORDS_PER_VERTEX: int = 2
MIN_FLAT_POLYGON_LENGTH: int = 4   # two vertices, one (closed) degenerate edge

# Layer copies
DEFAULT_MERGE_THRESHOLD: float = 5.0  # distance below which layer points are merged

__all__ = [
    'PARALLEL_TOLERANCE',
    'PARAM_MIN',
    'PARAM_MAX',
    'COORDS_PER_VERTEX',
    'MIN_FLAT_POLYGON_LENGTH',
    'DEFAULT_MERGE_THRESHOLD',
]
