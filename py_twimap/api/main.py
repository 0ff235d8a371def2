"""FastAPI main application."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Any, Dict, List
import structlog

from ..config import settings
from ..core.landmasses import DEFAULT_REGISTRY
from ..core.pipeline import LandmassLayer, render_landmasses
from ..core.placement import estimate_coordinates
from ..export.geojson import layers_to_geojson
from ..log_config import configure_logging
from ..schemas import ContainmentRecord, CoordinateRecord, LocationRecord, Snapshot

# Configure logging
configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="TWI Map Landmass API",
    description="Landmass assignment and coastline synthesis for a text-derived world map",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class LandmassResponse(BaseModel):
    """A rendered landmass polygon."""

    key: str
    fill_color: str
    border_color: str
    label_color: str
    member_count: int
    coastline: List[List[float]] = Field(..., description="Ring of [x, y] points, implicitly closed")

    @classmethod
    def from_layer(cls, layer: LandmassLayer) -> "LandmassResponse":
        return cls(
            key=layer.key,
            fill_color=layer.fill_color,
            border_color=layer.border_color,
            label_color=layer.label_color,
            member_count=layer.member_count,
            coastline=layer.coastline.tolist(),
        )


class RegistryEntry(BaseModel):
    """A registered landmass."""

    key: str
    color: str


class EstimateRequest(BaseModel):
    """Locations to place, with their containment and stored coordinates."""

    locations: List[LocationRecord] = Field(default_factory=list)
    containment: List[ContainmentRecord] = Field(default_factory=list)
    existing: List[CoordinateRecord] = Field(default_factory=list)


def _render(snapshot: Snapshot) -> List[LandmassLayer]:
    try:
        return render_landmasses(
            snapshot.to_locations(),
            snapshot.to_edges(),
            DEFAULT_REGISTRY,
            settings.resolver_options(),
            settings.coastline_options(),
        )
    except Exception as e:
        logger.error("Landmass rendering failed", error=str(e))
        raise HTTPException(status_code=500, detail="Landmass rendering failed")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "TWI Map Landmass API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/landmasses/registry", response_model=List[RegistryEntry])
async def get_registry():
    """List registered landmasses and their fill colors."""
    return [RegistryEntry(key=lm.key, color=lm.color) for lm in DEFAULT_REGISTRY.values()]


@app.post("/landmasses", response_model=List[LandmassResponse])
async def render_snapshot(snapshot: Snapshot):
    """Render coastlines for every landmass discovered in the snapshot."""
    logger.info(
        "Landmass render requested",
        locations=len(snapshot.locations),
        containment=len(snapshot.containment),
    )
    return [LandmassResponse.from_layer(layer) for layer in _render(snapshot)]


@app.post("/landmasses/geojson")
async def render_snapshot_geojson(snapshot: Snapshot) -> Dict[str, Any]:
    """Render the snapshot's landmasses as a GeoJSON FeatureCollection."""
    return layers_to_geojson(_render(snapshot))


@app.post("/coordinates/estimate", response_model=List[CoordinateRecord])
async def estimate(request: EstimateRequest):
    """Estimate coordinates for locations; manual coordinates are preserved."""
    logger.info("Coordinate estimation requested", locations=len(request.locations))
    try:
        placed = estimate_coordinates(
            [record.to_location() for record in request.locations],
            [record.to_edge() for record in request.containment],
            [record.to_coordinate() for record in request.existing],
        )
    except Exception as e:
        logger.error("Coordinate estimation failed", error=str(e))
        raise HTTPException(status_code=500, detail="Coordinate estimation failed")
    return [CoordinateRecord.from_coordinate(c) for c in placed.values()]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
