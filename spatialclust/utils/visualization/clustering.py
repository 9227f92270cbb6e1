"""Utilities for visualizing clustering results."""

# Standard Library Imports
from typing import Callable, List, Optional, Sequence, Tuple, Any
import os

# Third Party Imports
import numpy as np
import matplotlib.pyplot as plt

# Internal Imports
from spatialclust.core.clusterable.rules import center_of
from spatialclust.core.models.spatial.cluster import Cluster
from spatialclust.utils.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


def cluster_leaf_coordinates(
    clusters: Sequence[Cluster],
    leaf_center: Callable[[Any], np.ndarray] = center_of,
) -> Tuple[np.ndarray, np.ndarray]:
    """Collect the coordinates of every cluster's leaves.

    Args:
        clusters: Clusters to collect from
        leaf_center: Function giving the position of a leaf

    Returns:
        Tuple[np.ndarray, np.ndarray]: Leaf positions (N x 3) and, for each
            position, the index of the cluster it belongs to.
    """
    points: List[np.ndarray] = []
    labels: List[int] = []
    for index, cluster in enumerate(clusters):
        for leaf in cluster.flatten():
            points.append(leaf_center(leaf))
            labels.append(index)

    if not points:
        return np.empty((0, 3)), np.empty(0, dtype=int)
    return np.stack(points), np.array(labels, dtype=int)


def plot_clusters_3d(
    clusters: Sequence[Cluster],
    title: Optional[str] = None,
    output_path: Optional[str] = None,
    fig_size: Tuple[int, int] = (8, 8),
    show_centroids: bool = True,
) -> plt.Figure:
    """Plot the leaves of each cluster in 3D, colored by cluster.

    Args:
        clusters: Clusters to plot
        title: Plot title (optional)
        output_path: Path to save the figure (optional)
        fig_size: Figure size (width, height) in inches
        show_centroids: Whether to mark each cluster's centroid

    Returns:
        plt.Figure: The created figure
    """
    points, labels = cluster_leaf_coordinates(clusters)

    fig = plt.figure(figsize=fig_size)
    ax = fig.add_subplot(projection="3d")

    if len(points) > 0:
        ax.scatter(
            points[:, 0],
            points[:, 1],
            points[:, 2],
            c=labels,
            cmap="Spectral",
            s=20,
        )

    if show_centroids and clusters:
        centroids = np.stack([cluster.center() for cluster in clusters])
        ax.scatter(
            centroids[:, 0],
            centroids[:, 1],
            centroids[:, 2],
            c="black",
            marker="x",
            s=60,
            label="Centroids",
        )
        ax.legend(loc="upper right")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")

    if title:
        ax.set_title(title)

    # Save figure if output path is provided
    if output_path:
        try:
            # Ensure output directory exists
            directory = os.path.dirname(output_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            fig.savefig(output_path, dpi=300, bbox_inches="tight")
            logger.info(f"Figure saved to {output_path}")
        except OSError as e:
            logger.error(f"Error saving figure: {str(e)}")

    return fig
