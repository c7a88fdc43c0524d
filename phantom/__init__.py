"""Scene graph, scene objects, camera and utilities for a small 3D engine."""

__version__ = "0.1.0"