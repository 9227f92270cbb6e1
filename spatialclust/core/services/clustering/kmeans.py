"""K-means clustering service for clusterable elements."""

# Standard Library Imports
from dataclasses import dataclass
from logging import Logger
from typing import Any, List, Optional, Sequence

# Third Party Imports
import numpy as np

# Internal Imports
from spatialclust.core.clusterable.handle import Clusterable
from spatialclust.core.exceptions.services.clustering import (
    EmptyInputError,
    InvalidClusterCountError,
)
from spatialclust.core.models.spatial.cluster import Cluster
from spatialclust.utils.constants import KMEANS_ITERATIONS
from spatialclust.utils.logging import get_logger

# Initialize logger
logger: Logger = get_logger(__name__)


@dataclass
class KMeansConfig:
    """Configuration for K-means clustering.

    Attributes:
        n_clusters: Number of clusters to create
        seed: Seed for the random initialization (drawn from OS entropy if None)
        n_iterations: Number of assign/recompute rounds, run in full
    """

    n_clusters: int
    seed: Optional[int] = None
    n_iterations: int = KMEANS_ITERATIONS


class KMeans:
    """K-means over any collection of clusterable elements.

    Initial centroids are the centers of ``n_clusters`` elements sampled with
    replacement. Assignment and recomputation then run for a fixed number of
    iterations with no convergence test. Clusters left empty at the end are
    dropped; the rest keep their index order.

    The returned clusters are elements themselves, so they can be wrapped
    with ``wrap_all`` and clustered again.

    Attributes:
        config: The clustering configuration
        seed: The seed actually used for initialization
    """

    def __init__(
        self,
        n_clusters: int,
        seed: Optional[int] = None,
        n_iterations: int = KMEANS_ITERATIONS,
    ):
        """Initialize the K-means service.

        Args:
            n_clusters: Number of clusters to create, must be positive
            seed: Random seed (optional). Without one a seed is drawn once
                here, so repeated calls on the same instance still agree.
            n_iterations: Number of assign/recompute rounds

        Raises:
            InvalidClusterCountError: If n_clusters is not positive.
        """
        self.config = KMeansConfig(
            n_clusters=n_clusters, seed=seed, n_iterations=n_iterations
        )
        self._validate_config()
        self.seed: int = (
            seed if seed is not None else int(np.random.SeedSequence().entropy)
        )

        logger.info(
            f"Initialized KMeans with n_clusters={self.n_clusters}, "
            f"seed={self.seed}, iterations={self.config.n_iterations}"
        )

    @classmethod
    def from_config(cls, config: KMeansConfig) -> "KMeans":
        """Create a K-means service from a configuration.

        Args:
            config: The clustering configuration

        Returns:
            KMeans: A new K-means service
        """
        return cls(
            n_clusters=config.n_clusters,
            seed=config.seed,
            n_iterations=config.n_iterations,
        )

    @property
    def n_clusters(self) -> int:
        return self.config.n_clusters

    def _validate_config(self) -> None:
        if self.config.n_clusters <= 0:
            raise InvalidClusterCountError(self.config.n_clusters)
        if self.config.n_iterations <= 0:
            raise ValueError(
                f"n_iterations must be positive, got {self.config.n_iterations}"
            )

    def __call__(
        self,
        clusterables: Sequence[Clusterable],
        rng: Optional[Any] = None,
    ) -> List[Cluster]:
        """Cluster the given elements.

        Args:
            clusterables: Element handles to cluster
            rng: Random generator used for initialization (optional). Anything
                with numpy's ``Generator.integers`` signature works. Defaults
                to ``numpy.random.default_rng(self.seed)``.

        Returns:
            List[Cluster]: The non-empty clusters, in index order

        Raises:
            EmptyInputError: If no elements are given.
        """
        if len(clusterables) == 0:
            raise EmptyInputError()

        if rng is None:
            rng = np.random.default_rng(self.seed)

        centers = np.stack([clusterable.center() for clusterable in clusterables])
        clusters = self._init_clusters(centers, rng)

        last_iteration = self.config.n_iterations - 1
        for iteration in range(self.config.n_iterations):
            self._attach_to_nearest(clusters, clusterables, centers)
            logger.debug(
                f"Iteration {iteration}: sizes {[len(c) for c in clusters]}"
            )
            self._update_centers(clusters, erase=iteration != last_iteration)

        populated = [cluster for cluster in clusters if len(cluster) > 0]
        logger.info(
            f"K-means produced {len(populated)} non-empty clusters "
            f"from {len(clusterables)} elements ({self.n_clusters} requested)"
        )
        return populated

    def _init_clusters(self, centers: np.ndarray, rng: Any) -> List[Cluster]:
        """Seed each cluster with the center of a randomly sampled element.

        Args:
            centers: Element centers (N x 3)
            rng: Random generator

        Returns:
            List[Cluster]: Empty clusters with seeded centroids
        """
        indices = rng.integers(0, len(centers), size=self.n_clusters)
        return [
            Cluster(centroid=centers[index], label=label)
            for label, index in enumerate(indices)
        ]

    @staticmethod
    def _attach_to_nearest(
        clusters: List[Cluster],
        clusterables: Sequence[Clusterable],
        centers: np.ndarray,
    ) -> None:
        """Append every element to the cluster with the nearest centroid.

        Each element scans the clusters in order and moves to a later one
        only when its distance is strictly smaller, so ties go to the
        earliest cluster. No distance is smaller than NaN: when the first
        cluster was left empty its NaN centroid takes every element, while
        NaN centroids of later clusters never win.

        Args:
            clusters: Clusters to fill
            clusterables: Element handles, in input order
            centers: Element centers (N x 3), aligned with clusterables
        """
        centroids = np.stack([cluster.center() for cluster in clusters])
        distances = np.linalg.norm(
            centers[:, np.newaxis, :] - centroids[np.newaxis, :, :], axis=2
        )
        nan_first = np.isnan(distances[:, 0])
        distances[np.isnan(distances)] = np.inf
        nearest = np.where(nan_first, 0, np.argmin(distances, axis=1))
        if nan_first.any():
            logger.warning(
                f"{clusters[0]} has an undefined centroid and takes every element"
            )

        for clusterable, index in zip(clusterables, nearest):
            clusters[index].add(clusterable)

    @staticmethod
    def _update_centers(clusters: List[Cluster], erase: bool = True) -> None:
        """Recompute every centroid, optionally clearing membership.

        Args:
            clusters: Clusters to update
            erase: Whether to clear members after recomputing
        """
        for cluster in clusters:
            cluster.compute_center()
            if erase:
                cluster.erase()
