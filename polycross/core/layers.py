"""Intersections between scaled and rotated copies of a regular polygon.

Copy ``i`` is the base polygon scaled by :func:`copy_scale_factor` and then
rotated by ``i * angle_deg`` about the origin. Every pair of copies is scanned
and the resulting points are merged: a point closer than
``merge_threshold`` to one already kept is dropped. The merge only happens
here; the pairwise scan itself reports every edge-pair hit.
"""
from __future__ import annotations

import math
from typing import List, Optional, Union

from .config import LayerConfig, ScanConfig
from .geometry import Point
from .logging_utils import get_logger
from .scanner import find_all_intersections, unflatten_points

logger = get_logger('polycross.layers')

__all__ = ['scan_polygons', 'regular_polygon', 'copy_scale_factor', 'layer_polygons',
           'find_layer_intersections']


def scan_polygons(vertices_a, vertices_b, config: Optional[ScanConfig] = None) -> Union[List[float], List[Point]]:
    """Scan two flat polygons with the backend selected by ``config``."""
    cfg = config or ScanConfig()
    if cfg.backend == 'python':
        flat = find_all_intersections(vertices_a, vertices_b)
    else:
        # numba is imported on first array-backed scan only
        from .vectorized_ops import find_all_intersections_vectorized
        flat = find_all_intersections_vectorized(vertices_a, vertices_b, backend=cfg.backend)
    if cfg.return_points:
        return unflatten_points(flat)
    return flat


def regular_polygon(segments: int, radius: float) -> List[float]:
    """Flat vertices of a regular polygon centred on the origin, vertex 0 on +x."""
    if segments < 2:
        raise ValueError(f"segments must be >= 2, got {segments}")
    step = 2.0 * math.pi / segments
    flat: List[float] = []
    for k in range(segments):
        ang = k * step
        flat.append(radius * math.cos(ang))
        flat.append(radius * math.sin(ang))
    return flat


def copy_scale_factor(index: int, cfg: LayerConfig) -> float:
    step_factor = cfg.step_scale ** index
    if not cfg.use_modulus:
        return step_factor
    modulus_scale = ((index % cfg.modulus_value) + 1) / cfg.modulus_value
    return modulus_scale * step_factor


def layer_polygons(cfg: LayerConfig) -> List[List[float]]:
    """Return one flat polygon per copy, in copy order."""
    base = regular_polygon(cfg.segments, cfg.radius)
    polygons = []
    for i in range(cfg.copies):
        scale = copy_scale_factor(i, cfg)
        rot = math.radians(i * cfg.angle_deg)
        c, s = math.cos(rot), math.sin(rot)
        flat = []
        for k in range(0, len(base), 2):
            x = base[k] * scale
            y = base[k + 1] * scale
            flat.append(x * c - y * s)
            flat.append(x * s + y * c)
        polygons.append(flat)
    return polygons


def _too_close(p: Point, kept: List[Point], threshold: float) -> bool:
    for q in kept:
        if math.hypot(p.x - q.x, p.y - q.y) < threshold:
            return True
    return False


def find_layer_intersections(cfg: LayerConfig) -> List[Point]:
    """Merged intersection points across all copy pairs ``i < j``."""
    polygons = layer_polygons(cfg)
    pair_cfg = ScanConfig(backend=cfg.scan.backend, return_points=True)
    kept: List[Point] = []
    raw = 0
    for i in range(len(polygons)):
        for j in range(i + 1, len(polygons)):
            for p in scan_polygons(polygons[i], polygons[j], pair_cfg):
                raw += 1
                if not _too_close(p, kept, cfg.merge_threshold):
                    kept.append(p)
    logger.debug("%d copies: %d raw intersection(s), %d after merging (threshold=%g)",
                 len(polygons), raw, len(kept), cfg.merge_threshold)
    return kept
