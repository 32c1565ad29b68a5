"""
Tesselate - a two-player point-and-edge triangle game engine.
"""

__version__ = "0.1.0"
