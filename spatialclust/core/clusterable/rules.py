# spatialclust/core/clusterable/rules.py
"""
Center and flatten rules for clustering elements.

An element is any value for which a spatial center and a flattening down to
a leaf type can be resolved. Element kinds never share a base class; each
kind takes part in one of these ways:

    * it is an instance of the leaf type itself (flattens to ``[value]``),
    * it is a list or tuple of elements (flattens to the concatenation of its
      members, centers on the mean of its members' centers),
    * it exposes ``center()`` and ``flatten()`` methods (as ``Cluster`` does),
    * or rules for its class were registered with ``register_center`` and
      ``register_flatten``.

Rules are resolved through ``functools.singledispatch`` so registration on a
base class also covers its subclasses.

Methods:
    center_of: Resolve the spatial center of an element.
    flatten: Reduce an element to a list of leaf values.
    register_center: Decorator registering a center rule for a class.
    register_flatten: Decorator registering a flatten rule for a class.
    has_center_rule: Whether a center rule resolves for a value.
    has_flatten_rule: Whether a flatten rule to a leaf type resolves for a value.
"""

# Standard Library Imports
from functools import singledispatch
from typing import Any, Callable, List, Sequence, Type, TypeVar

# Third Party Imports
import numpy as np

# Internal Imports
from spatialclust.core.exceptions.models.clusterable import ElementContractError
from spatialclust.core.models.vector import Vector, as_vector
from spatialclust.utils.constants import VECTOR_DIMENSION

L = TypeVar("L")

CenterRule = Callable[[Any], Any]
FlattenRule = Callable[[Any, type], List[Any]]


@singledispatch
def _center_rule(value: Any) -> Any:
    center = getattr(value, "center", None)
    if callable(center):
        return center()
    raise ElementContractError(value, "center")


@_center_rule.register(list)
@_center_rule.register(tuple)
def _center_of_sequence(values: Sequence[Any]) -> Vector:
    if len(values) == 0:
        return np.full(VECTOR_DIMENSION, np.nan)
    return np.mean([center_of(value) for value in values], axis=0)


@singledispatch
def _flatten_rule(value: Any, leaf_type: type) -> List[Any]:
    flatten_method = getattr(value, "flatten", None)
    if callable(flatten_method):
        return list(flatten_method())
    raise ElementContractError(value, "flatten", leaf_type)


@_flatten_rule.register(list)
@_flatten_rule.register(tuple)
def _flatten_sequence(values: Sequence[Any], leaf_type: type) -> List[Any]:
    out: List[Any] = []
    for value in values:
        out.extend(flatten(value, leaf_type))
    return out


def center_of(value: Any) -> Vector:
    """Resolve the spatial center of an element.

    Args:
        value: Any element.

    Returns:
        Vector: The element's center as a new 3-component array.

    Raises:
        ElementContractError: If no center rule resolves for the value.
    """
    return as_vector(_center_rule(value))


def flatten(value: Any, leaf_type: Type[L]) -> List[L]:
    """Reduce an element to an ordered list of leaf values.

    Args:
        value: Any element.
        leaf_type: The common leaf type all elements collapse to.

    Returns:
        List[L]: The leaves, in order. The input is never modified.

    Raises:
        ElementContractError: If no flatten rule resolves for the value.
    """
    if isinstance(value, leaf_type):
        return [value]
    return _flatten_rule(value, leaf_type)


def register_center(cls: type) -> Callable[[CenterRule], CenterRule]:
    """Register a center rule for ``cls`` and its subclasses.

    Example:
        @register_center(Molecule)
        def _(molecule):
            return molecule.center_of_mass
    """
    return _center_rule.register(cls)


def register_flatten(cls: type) -> Callable[[FlattenRule], FlattenRule]:
    """Register a flatten rule for ``cls`` and its subclasses.

    The rule receives ``(value, leaf_type)`` and must return a list of
    ``leaf_type`` instances. Calling ``flatten`` on nested members from within
    a rule is allowed.
    """
    return _flatten_rule.register(cls)


def has_center_rule(value: Any) -> bool:
    """Whether a center rule resolves for ``value`` without evaluating it."""
    if isinstance(value, (list, tuple)):
        return all(has_center_rule(member) for member in value)
    rule = _center_rule.dispatch(type(value))
    if rule is not _center_rule.registry[object]:
        return True
    return callable(getattr(value, "center", None))


def has_flatten_rule(value: Any, leaf_type: type) -> bool:
    """Whether ``value`` can be flattened to ``leaf_type`` without evaluating it."""
    if isinstance(value, leaf_type):
        return True
    if isinstance(value, (list, tuple)):
        return all(has_flatten_rule(member, leaf_type) for member in value)
    rule = _flatten_rule.dispatch(type(value))
    if rule is not _flatten_rule.registry[object]:
        return True
    return callable(getattr(value, "flatten", None))
