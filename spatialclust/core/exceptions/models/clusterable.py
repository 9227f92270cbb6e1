# spatialclust/core/exceptions/models/clusterable.py
"""
Exceptions for the clusterable and spatial model modules.

Classes:
    ClusterableError: Base exception for clusterable elements.
    ElementContractError: Raised when a value cannot act as a clustering element.
    InvalidVectorError: Raised when a value cannot be used as a spatial vector.
"""

# Standard Library Imports
from typing import Any


class ClusterableError(Exception):
    """Base exception for clusterable elements."""

    pass


class ElementContractError(ClusterableError, TypeError):
    """Raised when no center or flatten rule resolves for a value's type."""

    def __init__(self, value: Any, capability: str, leaf_type: Any = None) -> None:
        self.value_type = type(value)
        self.capability = capability
        self.leaf_type = leaf_type
        target = f" to {leaf_type.__name__}" if leaf_type is not None else ""
        super().__init__(
            f"No {capability} rule{target} registered for "
            f"{self.value_type.__module__}.{self.value_type.__qualname__}."
        )


class InvalidVectorError(ClusterableError, ValueError):
    """Raised when a value is not a 3-component spatial vector."""

    def __init__(self, shape: Any) -> None:
        self.shape = shape
        super().__init__(f"Expected a vector with 3 components, got shape {shape}.")
