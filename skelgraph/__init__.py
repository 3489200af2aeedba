"""Skeleton diagram data, voxel neighbourhood topology checks and A* planning over sparse skeleton graphs."""

__version__ = "0.1.0"