"""
One landmass render pass: discover, resolve, synthesize, color.

Everything is rebuilt from the snapshot each call; no state survives
between passes.
"""

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

import numpy as np
import structlog

from .assignment import ResolverOptions, resolve
from .coastline import CoastlineOptions, synthesize
from .colors import darken, readable_text_color
from .landmasses import DEFAULT_REGISTRY, Landmass, color_for, discover_landmasses
from .models import ContainmentEdge, Location

logger = structlog.get_logger()

BORDER_DARKEN = 0.4


@dataclass(frozen=True)
class LandmassLayer:
    """Everything the drawing layer needs for one landmass polygon."""

    key: str
    fill_color: str
    border_color: str
    label_color: str
    coastline: np.ndarray  # (N, 2) ring of (x, y)
    member_count: int  # resolved locations, anchor excluded


def render_landmasses(
    locations: Iterable[Location],
    edges: Iterable[ContainmentEdge],
    registry: Mapping[str, Landmass] = DEFAULT_REGISTRY,
    resolver_options: Optional[ResolverOptions] = None,
    coastline_options: Optional[CoastlineOptions] = None,
) -> List[LandmassLayer]:
    """
    Build a layer for every landmass discovered in the snapshot.

    Args:
        locations: Visible locations for this pass
        edges: Containment edges (child -> parent)
        registry: Landmass registry
        resolver_options: Assignment thresholds
        coastline_options: Coastline shape parameters

    Returns:
        Layers in discovery order
    """
    locations = list(locations)
    discovered = discover_landmasses(locations, registry)
    clusters = resolve(locations, edges, discovered, resolver_options)

    layers = []
    for key, points in clusters.items():
        fill = color_for(key, registry)
        layers.append(
            LandmassLayer(
                key=key,
                fill_color=fill,
                border_color=darken(fill, BORDER_DARKEN),
                label_color=readable_text_color(fill),
                coastline=synthesize(points, key, coastline_options),
                member_count=len(points) - 1,
            )
        )

    logger.info("Landmass pass rendered", locations=len(locations), layers=len(layers))
    return layers
