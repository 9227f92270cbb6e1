# spatialclust/__init__.py
"""
Hierarchical K-means clustering of heterogeneous spatial elements.

Any value can be clustered once a center and a flattening to a common leaf
type resolve for it; clusters are elements too and can be clustered again.
"""

from spatialclust.core.clusterable import (
    Clusterable,
    center_of,
    flatten,
    register_center,
    register_flatten,
    wrap_all,
)
from spatialclust.core.models.spatial import Atom, Cluster
from spatialclust.core.services.clustering import KMeans, KMeansConfig

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Cluster",
    "Clusterable",
    "KMeans",
    "KMeansConfig",
    "center_of",
    "flatten",
    "register_center",
    "register_flatten",
    "wrap_all",
]
