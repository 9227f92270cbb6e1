"""Exceptions for the clustering services."""


class ClusteringError(Exception):
    """Base class for clustering-related exceptions."""

    pass


class InvalidClusterCountError(ClusteringError, ValueError):
    """Raised when the requested number of clusters is not positive."""

    def __init__(self, n_clusters: int) -> None:
        self.n_clusters = n_clusters
        super().__init__(f"Number of clusters must be positive, got {n_clusters}.")


class EmptyInputError(ClusteringError, ValueError):
    """Raised when clustering is requested on an empty element collection."""

    def __init__(self) -> None:
        super().__init__("Cannot cluster an empty collection of elements.")
