"""
GeoJSON export of landmass layers.

Coordinates are written in the map's flat plane as-is; no projection is
applied.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

import numpy as np
import structlog
from shapely.geometry import Polygon, mapping

from ..core.pipeline import LandmassLayer

logger = structlog.get_logger()


def coastline_polygon(coastline: np.ndarray) -> Polygon:
    """Shapely polygon for a coastline ring (closed automatically)."""
    return Polygon([(float(x), float(y)) for x, y in coastline])


def layer_to_feature(layer: LandmassLayer) -> Dict[str, Any]:
    """GeoJSON Feature for one landmass layer."""
    polygon = coastline_polygon(layer.coastline)
    if not polygon.is_valid:
        # Self-intersecting rings can come out of adversarial clusters
        logger.warning("Coastline polygon is not simple", landmass=layer.key)
    return {
        "type": "Feature",
        "geometry": mapping(polygon),
        "properties": {
            "landmass": layer.key,
            "fill": layer.fill_color,
            "stroke": layer.border_color,
            "label_color": layer.label_color,
            "members": layer.member_count,
            "area": float(polygon.area),
        },
    }


def layers_to_geojson(layers: Iterable[LandmassLayer]) -> Dict[str, Any]:
    """GeoJSON FeatureCollection with one polygon per landmass."""
    features = [layer_to_feature(layer) for layer in layers]
    logger.info("Exported landmasses to GeoJSON", features=len(features))
    return {"type": "FeatureCollection", "features": features}
