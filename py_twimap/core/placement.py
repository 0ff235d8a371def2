"""
Coordinate estimation for locations nobody has placed yet.

Coordinates live in a [-512, 512] plane matching the base map image
(x horizontal, y vertical). Placement order:

- manual coordinates are kept as-is
- well-known anchors (continents and major places) fill their fixed spots
- locations with a placed ancestor land near it, jittered by a hash of
  their name
- everything else lands around a per-type default position

All jitter is hash-derived, so estimation is deterministic.
"""

from typing import Dict, Iterable, Mapping, Optional, Union

import structlog

from .containment import ContainmentGraph
from .lcg_prng import hash_offset
from .models import ContainmentEdge, Coordinate, Location, LocationType, Point

logger = structlog.get_logger()

# Continents, positioned to match the base map image
LANDMASS_POSITIONS: Dict[str, Point] = {
    "izril": (200, -20),
    "baleros": (-220, -300),
    "chandrar": (-80, -120),
    "terandria": (-250, 250),
    "rhir": (350, 300),
    "drath archipelago": (420, 50),
    "drath": (420, 50),
}

# Southern Izril, where most early events happen
IZRIL_POSITIONS: Dict[str, Point] = {
    "liscor": (190, -40),
    "the wandering inn": (191, -38),
    "the inn": (191, -38),
    "inn": (191, -38),
    "celum": (150, 40),
    "esthelm": (130, 30),
    "wales": (120, 50),
    "invrisil": (140, 80),
    "pallass": (230, -70),
    "the blood fields": (180, -60),
    "blood fields": (180, -60),
    "bloodfields": (180, -60),
    "the high passes": (250, 20),
    "high passes": (250, 20),
    "the floodplains": (188, -43),
    "flood plains": (188, -43),
    "floodplains of liscor": (188, -43),
    "first landing": (110, 110),
    "the northern plains": (150, 90),
    "the human lands": (140, 70),
    "the drake lands": (200, -50),
    "great plains of izril": (180, -90),
    "vale forest": (160, 50),
    "ruins of liscor": (192, -41),
    "ruins of albez": (160, 10),
    "krakk forest": (170, 30),
}

CHANDRAR_POSITIONS: Dict[str, Point] = {
    "reim": (-50, -100),
    "hellios": (-60, -120),
    "germina": (-100, -140),
    "nerrhavia": (-110, -100),
    "nerrhavia's fallen": (-110, -100),
    "belchan": (-70, -80),
    "jecrass": (-40, -130),
    "medain": (-100, -80),
    "khelt": (-30, -70),
    "quarass": (-80, -130),
}

KNOWN_POSITIONS: Dict[str, Point] = {
    **LANDMASS_POSITIONS,
    **IZRIL_POSITIONS,
    **CHANDRAR_POSITIONS,
}

# Fallback centers for locations with no placed ancestor
TYPE_DEFAULTS: Dict[LocationType, Point] = {
    LocationType.CONTINENT: (0, 0),
    LocationType.NATION: (0, 0),
    LocationType.CITY: (80, 0),
    LocationType.TOWN: (60, 30),
    LocationType.VILLAGE: (50, 40),
    LocationType.BUILDING: (92, -28),
    LocationType.LANDMARK: (100, -10),
    LocationType.DUNGEON: (110, -20),
    LocationType.BODY_OF_WATER: (70, -30),
    LocationType.FOREST: (60, 50),
    LocationType.ROAD: (70, 20),
    LocationType.OTHER: (80, 10),
}

TYPE_SPREADS: Dict[LocationType, float] = {
    LocationType.CONTINENT: 50,
    LocationType.NATION: 40,
    LocationType.CITY: 25,
    LocationType.TOWN: 20,
    LocationType.VILLAGE: 20,
    LocationType.BUILDING: 5,
    LocationType.LANDMARK: 8,
}
DEFAULT_SPREAD = 20.0


def spread_for_type(location_type: LocationType) -> float:
    return TYPE_SPREADS.get(location_type, DEFAULT_SPREAD)


def _jittered(location: Location, center: Point) -> Coordinate:
    spread = spread_for_type(location.type)
    return Coordinate(
        location_id=location.id,
        x=center[0] + hash_offset(location.id, "x", spread),
        y=center[1] + hash_offset(location.id, "y", spread),
        confidence="estimated",
    )


def estimate_coordinates(
    locations: Iterable[Location],
    edges: Union[ContainmentGraph, Iterable[ContainmentEdge]] = (),
    existing: Iterable[Coordinate] = (),
    known_positions: Optional[Mapping[str, Point]] = None,
) -> Dict[str, Coordinate]:
    """
    Estimate a coordinate for every location.

    Args:
        locations: All known locations
        edges: Containment edges (child -> parent)
        existing: Previously stored coordinates; only manual ones are kept
        known_positions: Fixed anchor positions, defaults to KNOWN_POSITIONS

    Returns:
        Location key -> coordinate for every location and known anchor
    """
    if known_positions is None:
        known_positions = KNOWN_POSITIONS
    locations = list(locations)
    graph = edges if isinstance(edges, ContainmentGraph) else ContainmentGraph.from_edges(edges)

    placed: Dict[str, Coordinate] = {
        c.location_id: c for c in existing if c.is_manual
    }
    manual = len(placed)

    for key, (x, y) in known_positions.items():
        if key not in placed:
            placed[key] = Coordinate(location_id=key, x=float(x), y=float(y))

    near_parent = 0
    for location in locations:
        if location.id in placed:
            continue
        ancestor = graph.find_ancestor(
            location.id, lambda key: key in placed, include_self=False
        )
        if ancestor is not None:
            placed[location.id] = _jittered(location, placed[ancestor].point)
            near_parent += 1

    by_type = 0
    for location in locations:
        if location.id in placed:
            continue
        center = TYPE_DEFAULTS.get(location.type, (0, 0))
        placed[location.id] = _jittered(location, center)
        by_type += 1

    logger.info(
        "Coordinates estimated",
        manual=manual,
        near_parent=near_parent,
        by_type=by_type,
        total=len(placed),
    )
    return placed
