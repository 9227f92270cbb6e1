"""Cluster model for spatial clustering."""

# Standard Library Imports
from typing import Any, List, Optional
from uuid import uuid4, UUID

# Third Party Imports
import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Internal Imports
from spatialclust.core.clusterable.handle import Clusterable
from spatialclust.core.models.vector import Vector, as_vector, zero_vector
from spatialclust.utils.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


class Cluster(BaseModel):
    """Represents a cluster of clusterable elements.

    A cluster is itself an element: it has a center and flattens to the
    concatenation of its members' leaves. Wrapping clusters in ``Clusterable``
    handles therefore allows clustering clusters.

    The centroid is only updated by ``compute_center``. Adding or erasing
    members leaves it stale until the next recomputation.

    Attributes:
        id: The unique identifier for the cluster
        members: The element handles belonging to this cluster, in order
        centroid: The centroid as of the last recomputation (or the seed)
        label: The index of this cluster in the run that produced it
        name: The name of this cluster
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: UUID = Field(
        default_factory=uuid4, description="The unique identifier for the cluster."
    )
    members: List[Any] = Field(
        default_factory=list,
        description="The element handles belonging to this cluster.",
    )
    centroid: np.ndarray = Field(
        default_factory=zero_vector,
        description="The centroid as of the last recomputation.",
    )
    label: Optional[int] = Field(
        default=None, description="The index of this cluster in its clustering run."
    )
    name: Optional[str] = Field(default=None, description="The name of this cluster.")

    @field_validator("centroid", mode="before")
    @classmethod
    def _validate_centroid(cls, value: Any) -> Vector:
        return as_vector(value)

    def add(self, clusterable: Clusterable) -> None:
        """Append an element handle. The centroid is not recomputed.

        Args:
            clusterable: The handle to append.
        """
        self.members.append(clusterable)

    def center(self) -> Vector:
        """Returns the centroid as of the last recomputation.

        Returns:
            Vector: A copy of the centroid.
        """
        return self.centroid.copy()

    def compute_center(self) -> Vector:
        """Recompute the centroid as the mean of the members' centers.

        An empty cluster has no mean; its centroid becomes NaN.

        Returns:
            Vector: A copy of the new centroid.
        """
        if not self.members:
            logger.warning(f"{self} has no members, its centroid is undefined")

        total = zero_vector()
        for member in self.members:
            total += member.center()

        with np.errstate(invalid="ignore", divide="ignore"):
            self.centroid = total / float(len(self.members))

        return self.centroid.copy()

    def erase(self) -> None:
        """Remove all members. The centroid is kept until recomputed."""
        self.members.clear()

    def flatten(self) -> List[Any]:
        """Concatenate the leaves of every member, in member order.

        Returns:
            List[Any]: The leaves of all members.
        """
        out: List[Any] = []
        for member in self.members:
            out.extend(member.flatten())
        return out

    def clusterables(self) -> List[Clusterable]:
        """Returns a shallow copy of the member handles.

        Returns:
            List[Clusterable]: The member handles.
        """
        return list(self.members)

    def __eq__(self, other: object) -> bool:
        """Clusters are equal only to themselves.

        Field-wise comparison would compare centroid arrays element-wise,
        which has no single truth value.
        """
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __len__(self) -> int:
        """Returns the number of members in the cluster.

        Returns:
            int: The number of members in the cluster.
        """
        return len(self.members)

    def __str__(self) -> str:
        """Returns the string representation of the cluster.

        Returns:
            str: The string representation of the cluster.
        """
        if self.name:
            return self.name
        if self.label is not None:
            return f"Cluster-{self.label}"
        return f"Cluster-{self.id}"

    def __repr__(self) -> str:
        """Returns the string representation of the cluster.

        Returns:
            str: The string representation of the cluster.
        """
        return self.__str__()
