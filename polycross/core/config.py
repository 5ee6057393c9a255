"""Configuration objects for polycross scans and layer copies."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .constants import DEFAULT_MERGE_THRESHOLD

SCAN_BACKENDS = ('python', 'numpy', 'numba')


@dataclass
class ScanConfig:
    """How a polygon pair is scanned.

    - backend: 'python' (reference loop), 'numpy' or 'numba'.
    - return_points: return a list of Point instead of the flat float list.
    """
    backend: str = 'python'
    return_points: bool = False

    def __post_init__(self):
        if self.backend not in SCAN_BACKENDS:
            raise ValueError(f"unknown backend '{self.backend}', expected one of {SCAN_BACKENDS}")


@dataclass
class LayerConfig:
    """Scaled and rotated copies of one regular polygon.

    Attributes
    ----------
    segments : int
        Number of vertices of the base polygon.
    radius : float
        Circumradius of the base polygon.
    copies : int
        Number of copies to generate (copy 0 is the base polygon).
    angle_deg : float
        Rotation added per copy, in degrees.
    step_scale : float
        Geometric scale factor applied per copy (copy i is scaled by step_scale**i).
    use_modulus : bool
        Additionally scale copy i by ((i % modulus_value) + 1) / modulus_value.
    modulus_value : int
        Period of the modulus scale.
    merge_threshold : float
        Layer intersections closer than this to an already kept point are dropped.
    scan : ScanConfig
        Backend used for each copy pair.
    extras : dict
        Free-form dictionary for caller annotations.
    """
    segments: int = 4
    radius: float = 432.0
    copies: int = 1
    angle_deg: float = 15.0
    step_scale: float = 1.0
    use_modulus: bool = False
    modulus_value: int = 4
    merge_threshold: float = DEFAULT_MERGE_THRESHOLD
    scan: ScanConfig = field(default_factory=ScanConfig)
    extras: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.segments < 2:
            raise ValueError(f"segments must be >= 2, got {self.segments}")
        if self.copies < 0:
            raise ValueError(f"copies must be >= 0, got {self.copies}")
        if self.use_modulus and self.modulus_value < 1:
            raise ValueError(f"modulus_value must be >= 1 when use_modulus is set, got {self.modulus_value}")
        if self.merge_threshold < 0:
            raise ValueError(f"merge_threshold must be >= 0, got {self.merge_threshold}")


__all__ = ['SCAN_BACKENDS', 'ScanConfig', 'LayerConfig']
