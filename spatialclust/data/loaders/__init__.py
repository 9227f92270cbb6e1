# spatialclust/data/loaders/__init__.py
"""
Loaders for spatial elements stored on disk.
"""

from spatialclust.data.loaders.xyz import load_atoms, read_xyz

__all__ = ["load_atoms", "read_xyz"]
