"""
Landmass synthesis for a world map built from text mentions.
"""

__version__ = "0.1.0"
