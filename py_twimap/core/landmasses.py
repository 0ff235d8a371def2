"""
Landmass registry and per-pass discovery.

The registry is fixed at build time. Whether a landmass is discovered
depends on the snapshot: a continent-typed location with the landmass key
and a coordinate must be present, so discovery is recomputed on every pass.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping

import structlog

from .models import Location, Point

logger = structlog.get_logger()

DEFAULT_LANDMASS_COLOR = "#3d6b35"


@dataclass(frozen=True)
class Landmass:
    """A registered landmass and its fill color."""

    key: str
    color: str


# Colors follow the in-world descriptions: Izril grassland olive, Terandria
# meadow green, Chandrar desert sand, Baleros jungle green, Rhir scorched
# red-brown, Drath muted sage.
DEFAULT_REGISTRY: Dict[str, Landmass] = {
    landmass.key: landmass
    for landmass in (
        Landmass("izril", "#8aa65e"),
        Landmass("terandria", "#6db56a"),
        Landmass("chandrar", "#d4b06a"),
        Landmass("baleros", "#4a9a5a"),
        Landmass("rhir", "#8a5a4a"),
        Landmass("drath", "#7a9a72"),
        Landmass("drath archipelago", "#7a9a72"),
    )
}


def color_for(key: str, registry: Mapping[str, Landmass] = DEFAULT_REGISTRY) -> str:
    landmass = registry.get(key)
    return landmass.color if landmass else DEFAULT_LANDMASS_COLOR


def discover_landmasses(
    locations: Iterable[Location],
    registry: Mapping[str, Landmass] = DEFAULT_REGISTRY,
) -> Dict[str, Point]:
    """
    Find the registered landmasses present in the snapshot.

    Args:
        locations: Current visible snapshot
        registry: Landmass registry

    Returns:
        Mapping of landmass key to anchor coordinate, in snapshot order
    """
    discovered: Dict[str, Point] = {}
    for location in locations:
        if not location.is_landmass or location.id not in registry:
            continue
        if location.coordinate is None:
            logger.debug("Landmass has no anchor coordinate", landmass=location.id)
            continue
        discovered.setdefault(location.id, location.coordinate)
    return discovered
