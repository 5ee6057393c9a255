"""Tests for the scaled/rotated polygon copies and their merged intersections."""
import math

import pytest

from polycross.core.config import LayerConfig, ScanConfig
from polycross.core.geometry import Point
from polycross.core.layers import (
    copy_scale_factor, find_layer_intersections, layer_polygons, regular_polygon, scan_polygons,
)


class TestRegularPolygon:

    def test_square_vertices(self):
        flat = regular_polygon(4, 2.0)
        assert len(flat) == 8
        assert flat[0] == 2.0 and flat[1] == 0.0
        assert flat[2] == pytest.approx(0.0, abs=1e-12)
        assert flat[3] == pytest.approx(2.0)

    def test_all_vertices_on_circle(self):
        flat = regular_polygon(7, 3.0)
        for k in range(0, len(flat), 2):
            assert math.hypot(flat[k], flat[k + 1]) == pytest.approx(3.0)

    def test_too_few_segments(self):
        with pytest.raises(ValueError, match="segments"):
            regular_polygon(1, 1.0)


class TestCopies:

    def test_scale_without_modulus(self):
        cfg = LayerConfig(step_scale=0.5)
        assert copy_scale_factor(0, cfg) == 1.0
        assert copy_scale_factor(3, cfg) == 0.125

    def test_scale_with_modulus(self):
        cfg = LayerConfig(step_scale=0.5, use_modulus=True, modulus_value=4)
        assert copy_scale_factor(2, cfg) == pytest.approx(0.75 * 0.25)
        # index 4 wraps back to the first modulus step
        assert copy_scale_factor(4, cfg) == pytest.approx(0.25 * 0.5 ** 4)

    def test_layer_polygons_rotate_each_copy(self):
        cfg = LayerConfig(segments=4, radius=1.0, copies=3, angle_deg=90.0)
        polys = layer_polygons(cfg)
        assert len(polys) == 3
        # copy 1 is copy 0 rotated a quarter turn: vertex 0 lands on +y
        assert polys[1][0] == pytest.approx(0.0, abs=1e-12)
        assert polys[1][1] == pytest.approx(1.0)

    def test_zero_copies(self):
        assert layer_polygons(LayerConfig(copies=0)) == []


class TestLayerIntersections:

    def _octagram(self, **kw):
        # A diamond and the same diamond turned 45 degrees cross 8 times
        return LayerConfig(segments=4, radius=1.0, copies=2, angle_deg=45.0, **kw)

    def test_single_copy_has_no_pairs(self):
        assert find_layer_intersections(LayerConfig(copies=1)) == []

    def test_eight_crossings_without_merging(self):
        pts = find_layer_intersections(self._octagram(merge_threshold=0.0))
        assert len(pts) == 8
        assert all(isinstance(p, Point) for p in pts)
        half = math.sqrt(0.5)
        for p in pts:
            assert max(abs(p.x), abs(p.y)) == pytest.approx(half)

    def test_default_threshold_merges_everything_nearby(self):
        """All crossings of a unit-radius layer are within the 5.0 default threshold."""
        pts = find_layer_intersections(self._octagram())
        assert len(pts) == 1

    def test_partial_merging(self):
        # Neighbouring crossings are ~0.586 apart; a 0.6 threshold pairs them up
        pts = find_layer_intersections(self._octagram(merge_threshold=0.6))
        assert 1 < len(pts) < 8

    @pytest.mark.parametrize('backend', ['numpy', 'numba'])
    def test_backends_agree(self, backend):
        ref = find_layer_intersections(self._octagram(merge_threshold=0.0))
        got = find_layer_intersections(self._octagram(merge_threshold=0.0, scan=ScanConfig(backend=backend)))
        assert len(got) == len(ref)
        for p, q in zip(got, ref):
            assert p.x == pytest.approx(q.x, abs=1e-12)
            assert p.y == pytest.approx(q.y, abs=1e-12)


class TestConfigValidation:

    @pytest.mark.parametrize('kw, msg', [
        (dict(segments=1), 'segments'),
        (dict(copies=-1), 'copies'),
        (dict(use_modulus=True, modulus_value=0), 'modulus_value'),
        (dict(merge_threshold=-1.0), 'merge_threshold'),
    ])
    def test_layer_config_rejects(self, kw, msg):
        with pytest.raises(ValueError, match=msg):
            LayerConfig(**kw)

    def test_scan_config_rejects_backend(self):
        with pytest.raises(ValueError, match='backend'):
            ScanConfig(backend='gpu')

    def test_scan_polygons_points_mode(self):
        pts = scan_polygons([0, 0, 2, 2], [0, 2, 2, 0], ScanConfig(return_points=True))
        assert pts[0] == Point(1.0, 1.0)
