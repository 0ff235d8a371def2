"""
Configuration for the landmass map service.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
