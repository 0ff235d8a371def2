"""Tests for coastline synthesis."""

import numpy as np
import pytest

from py_twimap.core.coastline import (
    CoastlineOptions,
    base_radius,
    cluster_geometry,
    coastline_radii,
    smooth_ring,
    synthesize,
)
from py_twimap.core.lcg_prng import LCGPRNG


def distances(ring, center):
    return np.hypot(ring[:, 0] - center[0], ring[:, 1] - center[1])


def shoelace_area(ring):
    x, y = ring[:, 0], ring[:, 1]
    return 0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


class TestCoastline:
    """Deterministic organic coastlines."""

    @pytest.fixture
    def diamond(self):
        return [(10.0, 0.0), (0.0, 10.0), (-10.0, 0.0), (0.0, -10.0)]

    def test_ring_shape(self, diamond):
        ring = synthesize(diamond, "izril")
        assert ring.shape == (64, 2)
        assert np.all(np.isfinite(ring))

    def test_deterministic(self, diamond):
        first = synthesize(diamond, "izril")
        second = synthesize(list(diamond), "izril")
        assert np.array_equal(first, second)

    def test_key_changes_shape(self, diamond):
        assert not np.array_equal(synthesize(diamond, "izril"), synthesize(diamond, "Izril"))
        assert not np.array_equal(synthesize(diamond, "izril"), synthesize(diamond, "rhir"))

    def test_scenario_radius_bounds(self, diamond):
        cx, cy, max_dist = cluster_geometry(diamond)
        assert (cx, cy) == (0.0, 0.0)
        assert max_dist == 10.0
        assert base_radius(len(diamond), max_dist) == 35.0

        _, _, radii = coastline_radii(diamond, LCGPRNG.for_key("izril"))
        assert len(radii) == 64
        assert np.all(radii >= 35 * 0.6)
        assert np.all(radii <= 35 * 1.15)

        ring = synthesize(diamond, "izril")
        d = distances(ring, (0.0, 0.0))
        assert np.all(d >= 35 * 0.6)
        assert np.all(d <= 35 * 1.15)

    def test_ring_is_closed(self, diamond):
        ring = synthesize(diamond, "izril")
        segments = np.linalg.norm(np.diff(ring, axis=0), axis=1)
        closing = np.linalg.norm(ring[0] - ring[-1])
        assert closing <= 2 * np.median(segments)

    def test_single_point_minimal_shape(self):
        ring = synthesize([(200.0, -20.0)], "terandria")
        assert ring.shape == (64, 2)
        d = distances(ring, (200.0, -20.0))
        assert abs(d.mean() - 40.0) < 2.0
        assert np.all(d > 40 * 0.6)
        assert shoelace_area(ring) > np.pi * 30 ** 2

    def test_empty_cluster_still_produces_ring(self):
        ring = synthesize([], "drath")
        assert ring.shape == (64, 2)
        d = distances(ring, (0.0, 0.0))
        assert abs(d.mean() - 40.0) < 2.0

    def test_coincident_points_use_base_radius(self):
        points = [(5.0, 5.0), (5.2, 5.1), (5.1, 4.9)]
        _, _, radii = coastline_radii(points, LCGPRNG.for_key("baleros"))
        # All points within one unit: every angle starts from the base radius
        nominal = base_radius(3, cluster_geometry(points)[2])
        assert np.all(np.abs(radii - nominal) <= nominal * 0.075 + 1e-9)

    def test_bulges_toward_data(self):
        points = [(0.0, 0.0), (100.0, 0.0), (90.0, 10.0), (95.0, -5.0)]
        cx, _, _ = cluster_geometry(points)
        ring = synthesize(points, "chandrar")
        left = cx - ring[:, 0].min()
        right = ring[:, 0].max() - cx
        assert left > right + 15

    def test_base_radius_minimums(self):
        assert base_radius(1, 0.0) == 40.0
        assert base_radius(2, 5.0) == 40.0
        assert base_radius(3, 0.0) == 25.0
        assert base_radius(3, 10.0) == 35.0

    def test_custom_point_count(self, diamond):
        ring = synthesize(diamond, "izril", CoastlineOptions(num_points=16))
        assert ring.shape == (16, 2)

    def test_smoothing_preserves_centroid(self):
        rng = np.random.default_rng(7)
        ring = rng.normal(size=(64, 2)) * 10
        smoothed = smooth_ring(ring, 3)
        assert np.allclose(ring.mean(axis=0), smoothed.mean(axis=0))
        # Smoothing removes jaggedness
        assert np.abs(np.diff(smoothed, axis=0)).sum() < np.abs(np.diff(ring, axis=0)).sum()

    def test_smoothing_wraps_around(self):
        ring = np.zeros((8, 2))
        ring[0] = [8.0, 0.0]
        smoothed = smooth_ring(ring, 1)
        assert smoothed[-1][0] == pytest.approx(2.0)
        assert smoothed[0][0] == pytest.approx(4.0)
        assert smoothed[1][0] == pytest.approx(2.0)
