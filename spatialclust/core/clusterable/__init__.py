# spatialclust/core/clusterable/__init__.py
"""Clusterable element package."""

from spatialclust.core.clusterable.handle import Clusterable, wrap_all
from spatialclust.core.clusterable.rules import (
    center_of,
    flatten,
    has_center_rule,
    has_flatten_rule,
    register_center,
    register_flatten,
)

__all__ = [
    "Clusterable",
    "wrap_all",
    "center_of",
    "flatten",
    "has_center_rule",
    "has_flatten_rule",
    "register_center",
    "register_flatten",
]
