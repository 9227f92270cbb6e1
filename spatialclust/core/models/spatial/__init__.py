# spatialclust/core/models/spatial/__init__.py
"""Spatial models package."""

from spatialclust.core.models.spatial.atom import Atom
from spatialclust.core.models.spatial.cluster import Cluster

__all__ = ["Atom", "Cluster"]
