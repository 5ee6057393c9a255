"""Diagnostic plots of polygon pairs and their intersection points."""
from __future__ import annotations

import os as _os

import matplotlib as _mpl
# Non-interactive backend for headless runs, unless the caller picked one
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .logging_utils import get_logger
from .scanner import validate_flat_polygon

logger = get_logger('polycross.viz')

__all__ = ['plot_intersections']


def _closed_xy(flat: np.ndarray):
    pts = flat.reshape(-1, 2)
    pts = np.vstack([pts, pts[:1]])
    return pts[:, 0], pts[:, 1]


def plot_intersections(vertices_a, vertices_b, intersections, outname="intersections.png",
                       title=None, marker_size: float = 40.0):
    """Draw both closed polygons and mark the intersection points.

    Args:
        vertices_a, vertices_b: flat polygon vertex sequences
        intersections: flat [x0, y0, ...] list as returned by the scan
        outname: output image path
        title: optional figure title; defaults to the intersection count
        marker_size: scatter marker area for intersection points

    Returns the output path.
    """
    a = validate_flat_polygon(vertices_a, 'vertices_a')
    b = validate_flat_polygon(vertices_b, 'vertices_b')
    hits = np.asarray(intersections, dtype=np.float64).reshape(-1, 2)

    fig, ax = plt.subplots(figsize=(6, 6))
    xa, ya = _closed_xy(a)
    xb, yb = _closed_xy(b)
    ax.plot(xa, ya, color=(0.2, 0.4, 0.85), linewidth=1.5, label='polygon A')
    ax.plot(xb, yb, color=(0.2, 0.65, 0.3), linewidth=1.5, label='polygon B')
    if hits.shape[0]:
        ax.scatter(hits[:, 0], hits[:, 1], s=marker_size, color=(1.0, 0.2, 0.4),
                   alpha=0.8, zorder=3, label='intersections')
    ax.set_aspect('equal')
    ax.legend(loc='best', fontsize='small')
    ax.set_title(title if title is not None else f"{hits.shape[0]} intersection(s)")
    fig.savefig(outname, dpi=120, bbox_inches='tight')
    plt.close(fig)
    logger.info("wrote %s", outname)
    return outname
