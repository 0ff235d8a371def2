"""
Landmass assignment for located places.

Each non-landmass location with a coordinate is resolved to an owning
landmass:

1. Containment chain: walk parents from the location itself and take the
   first discovered landmass on the chain.
2. Proximity fallback: nearest discovered landmass anchor, accepted only
   within the acceptance radius.

Whichever path wins, a location farther than the outlier radius from the
chosen anchor is dropped so stale or miscategorized edges cannot stretch a
coastline. Bad data never raises; it just means the point is not drawn.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Union

import structlog

from .containment import ContainmentGraph
from .models import ContainmentEdge, Location, Point

logger = structlog.get_logger()


@dataclass
class ResolverOptions:
    """Assignment thresholds. Empirically tuned, not derived."""

    acceptance_radius: float = 180.0  # proximity fallback cutoff
    outlier_radius: float = 200.0  # hard cutoff for any assignment


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def resolve_by_containment(
    key: str, graph: ContainmentGraph, discovered: Mapping[str, Point]
) -> Optional[str]:
    """First discovered landmass on the containment chain of ``key``."""
    return graph.find_ancestor(key, lambda candidate: candidate in discovered)


def resolve_by_proximity(
    point: Point, discovered: Mapping[str, Point], acceptance_radius: float
) -> Optional[str]:
    """Nearest landmass anchor, or None when it is beyond ``acceptance_radius``."""
    best = None
    best_dist = math.inf
    for key, anchor in discovered.items():
        d = _distance(point, anchor)
        if d < best_dist:
            best_dist = d
            best = key
    if best_dist > acceptance_radius:
        return None
    return best


def resolve_landmass(
    location: Location,
    graph: ContainmentGraph,
    discovered: Mapping[str, Point],
    options: Optional[ResolverOptions] = None,
) -> Optional[str]:
    """
    Owning landmass of a single location, or None if it should not be drawn.

    Landmass locations and locations without a coordinate never resolve.
    """
    options = options or ResolverOptions()
    if location.is_landmass or location.coordinate is None:
        return None

    landmass = resolve_by_containment(location.id, graph, discovered)
    if landmass is None:
        landmass = resolve_by_proximity(
            location.coordinate, discovered, options.acceptance_radius
        )
        if landmass is None:
            logger.debug("Location unassigned", location=location.id)
            return None

    if _distance(location.coordinate, discovered[landmass]) > options.outlier_radius:
        logger.debug("Location rejected as outlier", location=location.id, landmass=landmass)
        return None
    return landmass


def resolve(
    locations: Iterable[Location],
    containment: Union[ContainmentGraph, Iterable[ContainmentEdge]],
    discovered: Mapping[str, Point],
    options: Optional[ResolverOptions] = None,
) -> Dict[str, List[Point]]:
    """
    Group located places into point clusters per discovered landmass.

    Every cluster is seeded with its landmass anchor, so a landmass with no
    members still gets a shape.

    Args:
        locations: Snapshot of locations
        containment: Containment graph or raw child -> parent edges
        discovered: Discovered landmass key -> anchor coordinate
        options: Assignment thresholds

    Returns:
        Landmass key -> member points (anchor first)
    """
    options = options or ResolverOptions()
    graph = (
        containment
        if isinstance(containment, ContainmentGraph)
        else ContainmentGraph.from_edges(containment)
    )

    clusters: Dict[str, List[Point]] = {}
    for key, anchor in discovered.items():
        if anchor is None:
            raise ValueError(f"Discovered landmass {key!r} has no anchor coordinate")
        clusters[key] = [anchor]

    dropped = 0
    for location in locations:
        if location.is_landmass or location.coordinate is None:
            continue
        landmass = resolve_landmass(location, graph, discovered, options)
        if landmass is None:
            dropped += 1
            continue
        clusters[landmass].append(location.coordinate)

    logger.info(
        "Landmass assignment complete",
        landmasses=len(clusters),
        assigned=sum(len(points) - 1 for points in clusters.values()),
        dropped=dropped,
    )
    return clusters
