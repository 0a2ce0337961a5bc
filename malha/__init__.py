"""Doubly connected edge lists for polygonal meshes, with topology checks."""

__version__ = "0.1.0"
__all__ = ["cli", "dcel", "mesh", "sweepline"]