"""
Organic coastline synthesis.

Turns a cluster of points into a closed ring that bulges toward the data,
wobbles a little, and is smoothed into a natural-looking outline. The
wobble comes from an LCG seeded by the landmass key, so the same cluster
and key always give the same ring and repeated renders do not jitter.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import structlog

from .lcg_prng import LCGPRNG
from .models import Point

logger = structlog.get_logger()


@dataclass
class CoastlineOptions:
    """Shape parameters. Empirically tuned, not derived."""

    num_points: int = 64  # vertices on the ring
    padding: float = 25.0  # margin beyond the outermost member
    min_radius: float = 25.0
    sparse_min_radius: float = 40.0  # used for clusters of <= sparse_threshold points
    sparse_threshold: int = 2
    coincident_distance: float = 1.0  # below this, all points count as one spot
    inner_floor: float = 0.5  # local radius floor as a fraction of base radius
    noise_amplitude: float = 0.15  # full noise span as a fraction of base radius
    min_noise_fraction: float = 0.6  # noise may not shrink a radius below this
    smoothing_passes: int = 3
    smoothing_weights: Tuple[float, float, float] = (0.25, 0.5, 0.25)


def cluster_geometry(points: Sequence[Point]) -> Tuple[float, float, float]:
    """
    Centroid and maximum member distance of a cluster.

    Returns:
        (cx, cy, max_dist); an empty cluster is centered on the origin
    """
    if not points:
        return 0.0, 0.0, 0.0
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    max_dist = max(math.hypot(p[0] - cx, p[1] - cy) for p in points)
    return cx, cy, max_dist


def base_radius(
    point_count: int, max_dist: float, options: Optional[CoastlineOptions] = None
) -> float:
    """Nominal ring radius, never below the (sparse) minimum."""
    options = options or CoastlineOptions()
    if point_count <= options.sparse_threshold:
        min_radius = options.sparse_min_radius
    else:
        min_radius = options.min_radius
    return max(max_dist + options.padding, min_radius)


def smooth_ring(ring: np.ndarray, passes: int, weights=(0.25, 0.5, 0.25)) -> np.ndarray:
    """Circular 3-point weighted moving average, applied ``passes`` times."""
    w_prev, w_curr, w_next = weights
    for _ in range(passes):
        prev = np.roll(ring, 1, axis=0)
        nxt = np.roll(ring, -1, axis=0)
        ring = prev * w_prev + ring * w_curr + nxt * w_next
    return ring


def coastline_radii(
    points: Sequence[Point],
    rng: LCGPRNG,
    options: Optional[CoastlineOptions] = None,
) -> Tuple[float, float, np.ndarray]:
    """
    Noisy radius for every ring angle, before smoothing.

    Returns:
        (cx, cy, radii) with one radius per angle
    """
    options = options or CoastlineOptions()
    cx, cy, max_dist = cluster_geometry(points)
    radius = base_radius(len(points), max_dist, options)
    single_spot = max_dist < options.coincident_distance

    offsets = [(p[0] - cx, p[1] - cy) for p in points]
    radii = np.empty(options.num_points, dtype=np.float64)

    for i in range(options.num_points):
        angle = (i / options.num_points) * math.pi * 2
        dx = math.cos(angle)
        dy = math.sin(angle)

        if single_spot:
            local = radius
        else:
            # Farthest member roughly in this direction
            local = radius * options.inner_floor
            for px, py in offsets:
                if px * dx + py * dy > 0:
                    local = max(local, math.hypot(px, py) + options.padding)

        noise = (rng.random() - 0.5) * radius * options.noise_amplitude
        radii[i] = max(local * options.min_noise_fraction, local + noise)

    return cx, cy, radii


def synthesize(
    points: Sequence[Point],
    landmass_key: str,
    options: Optional[CoastlineOptions] = None,
) -> np.ndarray:
    """
    Generate the coastline ring for a landmass cluster.

    Args:
        points: Cluster points (x, y), anchor included
        landmass_key: Normalized landmass key; seeds the noise
        options: Shape parameters

    Returns:
        Array of shape (num_points, 2) with (x, y) ring vertices. The ring is
        closed implicitly: the last vertex connects back to the first.
    """
    options = options or CoastlineOptions()
    rng = LCGPRNG.for_key(landmass_key)

    cx, cy, radii = coastline_radii(points, rng, options)
    angles = np.arange(options.num_points) / options.num_points * math.pi * 2
    ring = np.column_stack(
        (cx + np.cos(angles) * radii, cy + np.sin(angles) * radii)
    )
    ring = smooth_ring(ring, options.smoothing_passes, options.smoothing_weights)

    logger.debug(
        "Coastline synthesized",
        landmass=landmass_key,
        members=len(points),
        mean_radius=float(radii.mean()),
    )
    return ring
