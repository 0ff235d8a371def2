"""Tests for the full landmass render pass and GeoJSON export."""

import numpy as np
import pytest

from py_twimap.core.models import ContainmentEdge, Location
from py_twimap.core.pipeline import render_landmasses
from py_twimap.export.geojson import coastline_polygon, layers_to_geojson


@pytest.fixture
def snapshot():
    locations = [
        Location.create("Izril", "continent", (200, -20)),
        Location.create("Liscor", "city", (190, -40)),
        Location.create("Celum", "city", (150, 40)),
        Location.create("Reim", "city", (-50, -100)),
        Location.create("Wistram", "building"),
    ]
    edges = [
        ContainmentEdge.create("Liscor", "Izril"),
        ContainmentEdge.create("Reim", "Chandrar"),
    ]
    return locations, edges


class TestRenderLandmasses:
    """Discover, resolve, synthesize and color in one pass."""

    def test_one_layer_per_discovered_landmass(self, snapshot):
        locations, edges = snapshot
        layers = render_landmasses(locations, edges)
        assert [layer.key for layer in layers] == ["izril"]

        izril = layers[0]
        assert izril.fill_color == "#8aa65e"
        assert izril.border_color == "#536438"
        assert izril.label_color == "#1a1a2e"
        assert izril.member_count == 2
        assert izril.coastline.shape == (64, 2)

    def test_deterministic_across_passes(self, snapshot):
        locations, edges = snapshot
        first = render_landmasses(locations, edges)
        second = render_landmasses(locations, edges)
        assert np.array_equal(first[0].coastline, second[0].coastline)

    def test_discovery_follows_snapshot(self, snapshot):
        locations, edges = snapshot
        locations = locations + [Location.create("Chandrar", "continent", (-80, -120))]
        layers = {layer.key: layer for layer in render_landmasses(locations, edges)}
        assert set(layers) == {"izril", "chandrar"}
        assert layers["chandrar"].member_count == 1
        assert layers["chandrar"].fill_color == "#d4b06a"

    def test_small_scenario(self):
        locations = [
            Location.create("izril", "continent", (0, 0)),
            Location.create("a", "town", (10, 0)),
            Location.create("b", "town", (0, 10)),
            Location.create("c", "town", (-10, 0)),
        ]
        layers = render_landmasses(locations, [])
        assert len(layers) == 1
        assert layers[0].member_count == 3
        assert len(layers[0].coastline) == 64

    def test_empty_snapshot(self):
        assert render_landmasses([], []) == []


class TestGeoJSON:
    """GeoJSON export of rendered layers."""

    def test_feature_collection(self, snapshot):
        locations, edges = snapshot
        collection = layers_to_geojson(render_landmasses(locations, edges))
        assert collection["type"] == "FeatureCollection"
        assert len(collection["features"]) == 1

        feature = collection["features"][0]
        assert feature["geometry"]["type"] == "Polygon"
        ring = feature["geometry"]["coordinates"][0]
        assert len(ring) == 65
        assert tuple(ring[0]) == tuple(ring[-1])
        assert feature["properties"]["landmass"] == "izril"
        assert feature["properties"]["stroke"] == "#536438"
        assert feature["properties"]["area"] > 0

    def test_coastline_polygon_valid_for_simple_cluster(self, snapshot):
        locations, edges = snapshot
        layer = render_landmasses(locations, edges)[0]
        polygon = coastline_polygon(layer.coastline)
        assert polygon.is_valid
        assert polygon.contains(polygon.centroid)
