"""Tests for the preview renderer and CLI."""

import json

from py_twimap.core.models import ContainmentEdge, Location
from py_twimap.core.pipeline import render_landmasses
from py_twimap.visualize import main, render_preview


SNAPSHOT = {
    "locations": [
        {"id": "Izril", "type": "continent", "coordinate": {"x": 200, "y": -20}},
        {"id": "Liscor", "type": "city", "coordinate": {"x": 190, "y": -40}},
        {"id": "Rhir", "type": "continent", "coordinate": {"x": 350, "y": 300}},
    ],
    "containment": [{"child": "Liscor", "parent": "Izril"}],
}


class TestVisualize:
    """Image output."""

    def test_render_preview_writes_image(self, tmp_path):
        locations = [
            Location.create("Izril", "continent", (200, -20)),
            Location.create("Liscor", "city", (190, -40)),
            Location.create("Wistram", "building"),
        ]
        layers = render_landmasses(locations, [ContainmentEdge("liscor", "izril")])
        output = render_preview(layers, locations, tmp_path / "preview.png", title="Izril", dpi=50)
        assert output.exists()
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_cli_writes_png_and_geojson(self, tmp_path):
        snapshot_path = tmp_path / "snapshot.json"
        snapshot_path.write_text(json.dumps(SNAPSHOT), encoding="utf-8")
        png = tmp_path / "map.png"
        geojson = tmp_path / "map.geojson"

        assert main([str(snapshot_path), "-o", str(png), "--geojson", str(geojson)]) == 0
        assert png.exists()
        collection = json.loads(geojson.read_text(encoding="utf-8"))
        keys = [f["properties"]["landmass"] for f in collection["features"]]
        assert keys == ["izril", "rhir"]
