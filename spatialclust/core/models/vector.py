# spatialclust/core/models/vector.py
"""Spatial vector helpers.

Centers and centroids are plain 3-component float64 numpy arrays.
"""

# Standard Library Imports
from typing import Any

# Third Party Imports
import numpy as np
from numpy.typing import NDArray

# Internal Imports
from spatialclust.core.exceptions.models.clusterable import InvalidVectorError
from spatialclust.utils.constants import VECTOR_DIMENSION

Vector = NDArray[np.float64]


def as_vector(values: Any) -> Vector:
    """Convert a 3-element sequence into a spatial vector.

    Args:
        values: Any array-like with exactly three components.

    Returns:
        Vector: A new float64 array of shape (3,).

    Raises:
        InvalidVectorError: If the values do not form a 3-component vector.
    """
    vector = np.array(values, dtype=np.float64)
    if vector.shape != (VECTOR_DIMENSION,):
        raise InvalidVectorError(vector.shape)
    return vector


def zero_vector() -> Vector:
    """Return the origin."""
    return np.zeros(VECTOR_DIMENSION, dtype=np.float64)
