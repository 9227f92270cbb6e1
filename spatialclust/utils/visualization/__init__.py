"""Visualization utilities package."""

from spatialclust.utils.visualization.clustering import (
    cluster_leaf_coordinates,
    plot_clusters_3d,
)

__all__ = [
    # Clustering visualization
    "cluster_leaf_coordinates",
    "plot_clusters_3d",
]
