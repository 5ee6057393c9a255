"""Public package API for polycross.

Segment and polygon-edge intersection over plain coordinate sequences. This
facade gives a flat import surface on top of ``polycross.core`` and defers
the matplotlib-backed plotting module and the numba-backed array kernels
until first use, so ``import polycross`` stays light.

Example
-------
    from polycross import find_intersection, find_all_intersections

    find_intersection((0, 0), (2, 2), (0, 2), (2, 0))   # Point(x=1.0, y=1.0)
    find_all_intersections([0, 0, 1, 0, 1, 1, 0, 1],
                           [0.5, 0.5, 1.5, 0.5, 1.5, 1.5, 0.5, 1.5])
    # [1.0, 0.5, 0.5, 1.0]
"""
from importlib import import_module as _imp
from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _pkg_version
import logging as _logging

try:
    __version__ = _pkg_version("polycross")  # populated when installed
except _PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules (pure Python plus numpy)
_const = _imp('polycross.core.constants')
_geom = _imp('polycross.core.geometry')
_scan = _imp('polycross.core.scanner')
_conf = _imp('polycross.core.config')
_layers = _imp('polycross.core.layers')
_log = _imp('polycross.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)

        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m

        def __getattr__(self, item):
            # Unset slot lookups land here too; don't recurse into _load()
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)

        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


def _lazy_attr(mod_name, name):
    def _wrapper(*args, **kwargs):
        return getattr(_imp(mod_name), name)(*args, **kwargs)
    _wrapper.__name__ = name
    return _wrapper


# matplotlib is only needed for plots, numba only for the array backends
visualization = _lazy_module('polycross.core.visualization')
vectorized_ops = _lazy_module('polycross.core.vectorized_ops')

# Segment primitive
Point = _geom.Point
find_intersection = _geom.find_intersection
intersect_segments = _geom.intersect_segments

# Polygon scan
find_all_intersections = _scan.find_all_intersections
find_intersection_points = _scan.find_intersection_points
validate_flat_polygon = _scan.validate_flat_polygon
polygon_edges = _scan.polygon_edges
flatten_points = _scan.flatten_points
unflatten_points = _scan.unflatten_points
find_all_intersections_vectorized = _lazy_attr('polycross.core.vectorized_ops',
                                               'find_all_intersections_vectorized')
scan_polygons = _layers.scan_polygons

# Layer copies
ScanConfig = _conf.ScanConfig
LayerConfig = _conf.LayerConfig
regular_polygon = _layers.regular_polygon
layer_polygons = _layers.layer_polygons
find_layer_intersections = _layers.find_layer_intersections

# Tolerances
PARALLEL_TOLERANCE = _const.PARALLEL_TOLERANCE
PARAM_MIN = _const.PARAM_MIN
PARAM_MAX = _const.PARAM_MAX

# Logging
get_logger = _log.get_logger
configure_logging = _log.configure_logging

# Namespace submodules
constants = _const
geometry = _geom
scanner = _scan
config = _conf
layers = _layers

__all__ = [
    '__version__',
    # segment primitive
    'Point', 'find_intersection', 'intersect_segments',
    # polygon scan
    'find_all_intersections', 'find_intersection_points', 'find_all_intersections_vectorized',
    'scan_polygons', 'validate_flat_polygon', 'polygon_edges', 'flatten_points', 'unflatten_points',
    # layer copies
    'ScanConfig', 'LayerConfig', 'regular_polygon', 'layer_polygons', 'find_layer_intersections',
    # tolerances
    'PARALLEL_TOLERANCE', 'PARAM_MIN', 'PARAM_MAX',
    # logging
    'get_logger', 'configure_logging',
    # submodules / namespaces
    'constants', 'geometry', 'scanner', 'vectorized_ops', 'config', 'layers', 'visualization',
]
