"""
HTTP API for landmass rendering.
"""
