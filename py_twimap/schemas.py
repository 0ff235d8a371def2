"""Pydantic models for snapshot data exchanged with the data layer."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .core.models import ContainmentEdge, Coordinate, Location, normalize_name


class PointModel(BaseModel):
    """A point in the map plane."""

    x: float
    y: float


class LocationRecord(BaseModel):
    """Location as served by the data layer; display fields are ignored."""

    id: str = Field(..., min_length=1, description="Location name or key")
    type: str = Field("other", description="Location classification")
    coordinate: Optional[PointModel] = Field(None, description="Position, if known")

    def to_location(self) -> Location:
        coordinate = (self.coordinate.x, self.coordinate.y) if self.coordinate else None
        return Location.create(self.id, self.type, coordinate)


class ContainmentRecord(BaseModel):
    """Child lies inside parent."""

    child: str
    parent: str

    def to_edge(self) -> ContainmentEdge:
        return ContainmentEdge.create(self.child, self.parent)


class CoordinateRecord(BaseModel):
    """Stored coordinate with provenance."""

    location_id: str
    x: float
    y: float
    confidence: str = Field("estimated", pattern="^(manual|estimated)$")

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> "CoordinateRecord":
        return cls(
            location_id=coordinate.location_id,
            x=coordinate.x,
            y=coordinate.y,
            confidence=coordinate.confidence,
        )

    def to_coordinate(self) -> Coordinate:
        return Coordinate(
            location_id=normalize_name(self.location_id),
            x=self.x,
            y=self.y,
            confidence=self.confidence,
        )


class Snapshot(BaseModel):
    """The visible locations and containment edges for one render pass."""

    locations: List[LocationRecord] = Field(default_factory=list)
    containment: List[ContainmentRecord] = Field(default_factory=list)

    def to_locations(self) -> List[Location]:
        return [record.to_location() for record in self.locations]

    def to_edges(self) -> List[ContainmentEdge]:
        return [record.to_edge() for record in self.containment]
