"""
Snapshot data types shared by the landmass engine.

Locations, containment edges and coordinates arrive from the data layer on
every render pass. They are plain immutable values; nothing here keeps state
between passes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Point = Tuple[float, float]


class LocationType(str, Enum):
    """Closed set of location classifications."""

    CONTINENT = "continent"
    NATION = "nation"
    CITY = "city"
    TOWN = "town"
    VILLAGE = "village"
    BUILDING = "building"
    LANDMARK = "landmark"
    DUNGEON = "dungeon"
    BODY_OF_WATER = "body_of_water"
    FOREST = "forest"
    ROAD = "road"
    OTHER = "other"

    @classmethod
    def parse(cls, value) -> "LocationType":
        """Parse a type tag, degrading unknown tags to ``OTHER``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.OTHER


# Top-level landmass classification
LANDMASS_TYPE = LocationType.CONTINENT


def normalize_name(name: str) -> str:
    """Canonical location key: brackets stripped, trimmed, lower-cased."""
    return name.replace("[", "").replace("]", "").strip().lower()


@dataclass(frozen=True)
class Location:
    """A named place, optionally pinned to a point in the map plane."""

    id: str
    type: LocationType = LocationType.OTHER
    coordinate: Optional[Point] = None

    @classmethod
    def create(cls, name: str, type="other", coordinate=None) -> "Location":
        """Build a location from raw data-layer values."""
        if coordinate is not None:
            coordinate = (float(coordinate[0]), float(coordinate[1]))
        return cls(
            id=normalize_name(name),
            type=LocationType.parse(type),
            coordinate=coordinate,
        )

    @property
    def is_landmass(self) -> bool:
        return self.type == LANDMASS_TYPE

    @property
    def is_placed(self) -> bool:
        return self.coordinate is not None


@dataclass(frozen=True)
class ContainmentEdge:
    """``child`` lies geographically inside ``parent``."""

    child: str
    parent: str

    @classmethod
    def create(cls, child: str, parent: str) -> "ContainmentEdge":
        return cls(child=normalize_name(child), parent=normalize_name(parent))


@dataclass(frozen=True)
class Coordinate:
    """Position of a location with its provenance."""

    location_id: str
    x: float
    y: float
    confidence: str = "estimated"  # "manual" or "estimated"

    @property
    def point(self) -> Point:
        return (self.x, self.y)

    @property
    def is_manual(self) -> bool:
        return self.confidence == "manual"
