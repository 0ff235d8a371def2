"""
Export of rendered landmasses to interchange formats.
"""

from .geojson import layer_to_feature, layers_to_geojson, coastline_polygon

__all__ = ['layer_to_feature', 'layers_to_geojson', 'coastline_polygon']
