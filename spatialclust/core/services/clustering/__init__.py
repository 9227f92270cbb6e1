# spatialclust/core/services/clustering/__init__.py
"""Clustering services package."""

from spatialclust.core.services.clustering.kmeans import KMeans, KMeansConfig

__all__ = ["KMeans", "KMeansConfig"]
