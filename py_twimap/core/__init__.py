"""
Core landmass assignment and coastline synthesis.
"""

from .models import Location, LocationType, ContainmentEdge, Coordinate, normalize_name
from .containment import ContainmentGraph
from .lcg_prng import LCGPRNG, hash_string, hash_offset
from .assignment import ResolverOptions, resolve
from .coastline import CoastlineOptions, synthesize
from .colors import darken, luminance, readable_text_color
from .landmasses import Landmass, DEFAULT_REGISTRY, discover_landmasses
from .pipeline import LandmassLayer, render_landmasses
from .placement import estimate_coordinates

__all__ = ['Location', 'LocationType', 'ContainmentEdge', 'Coordinate', 'normalize_name',
           'ContainmentGraph', 'LCGPRNG', 'hash_string', 'hash_offset',
           'ResolverOptions', 'resolve', 'CoastlineOptions', 'synthesize',
           'darken', 'luminance', 'readable_text_color',
           'Landmass', 'DEFAULT_REGISTRY', 'discover_landmasses',
           'LandmassLayer', 'render_landmasses', 'estimate_coordinates']
