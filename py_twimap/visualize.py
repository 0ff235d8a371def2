#!/usr/bin/env python3
"""
Render a snapshot's landmasses to an image.

Draws each coastline filled with its landmass color and stroked with the
darkened border color, then the located places on top.
"""

import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon
import structlog

from .config import settings
from .core.landmasses import DEFAULT_REGISTRY
from .core.pipeline import render_landmasses
from .export.geojson import layers_to_geojson
from .log_config import configure_logging
from .schemas import Snapshot

logger = structlog.get_logger()

SEA_COLOR = "#1b2a41"
MARKER_COLOR = "#f5f0e1"


def render_preview(layers, locations, output_path, title=None, dpi=150):
    """
    Draw landmass layers and location markers to ``output_path``.

    Args:
        layers: LandmassLayer list from render_landmasses
        locations: Locations to mark (unplaced ones are skipped)
        output_path: Image file to write
        title: Optional figure title
        dpi: Output resolution

    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    fig, ax = plt.subplots(figsize=(10, 10))
    ax.set_facecolor(SEA_COLOR)

    for layer in layers:
        patch = Polygon(
            layer.coastline,
            closed=True,
            facecolor=layer.fill_color,
            edgecolor=layer.border_color,
            linewidth=1.5,
            alpha=0.85,
        )
        ax.add_patch(patch)
        cx, cy = layer.coastline.mean(axis=0)
        ax.text(
            cx, cy, layer.key.title(),
            color=layer.label_color, ha="center", va="center", fontsize=9,
        )

    placed = [loc for loc in locations if loc.coordinate is not None]
    if placed:
        xs = [loc.coordinate[0] for loc in placed]
        ys = [loc.coordinate[1] for loc in placed]
        ax.scatter(xs, ys, s=6, c=MARKER_COLOR, zorder=3)

    ax.autoscale_view()
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)

    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info("Preview written", path=str(output_path), layers=len(layers))
    return output_path


def main(argv=None):
    """Render a JSON snapshot file to a PNG (and optionally GeoJSON)."""
    import argparse

    parser = argparse.ArgumentParser(description="Render landmass coastlines for a snapshot")
    parser.add_argument("snapshot", help="JSON file with 'locations' and 'containment'")
    parser.add_argument("-o", "--output", default="landmasses.png", help="Image to write")
    parser.add_argument("--geojson", help="Also write the landmasses as GeoJSON")
    parser.add_argument("--title", help="Figure title")

    args = parser.parse_args(argv)
    configure_logging(settings.log_level, "plain")

    payload = json.loads(Path(args.snapshot).read_text(encoding="utf-8"))
    snapshot = Snapshot.model_validate(payload)
    locations = snapshot.to_locations()
    layers = render_landmasses(
        locations,
        snapshot.to_edges(),
        DEFAULT_REGISTRY,
        settings.resolver_options(),
        settings.coastline_options(),
    )

    render_preview(layers, locations, args.output, title=args.title)
    if args.geojson:
        Path(args.geojson).write_text(json.dumps(layers_to_geojson(layers)), encoding="utf-8")
        logger.info("GeoJSON written", path=args.geojson)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
