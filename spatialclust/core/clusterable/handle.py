# spatialclust/core/clusterable/handle.py
"""Capability-erased element handle.

``Clusterable`` lets any element take part in clustering, whatever its type,
as long as a center and a flattening to the leaf type resolve for it. The
element is stored once inside an immutable adapter; copies of the handle share
that adapter instead of duplicating the element.
"""

# Standard Library Imports
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

# Internal Imports
from spatialclust.core.clusterable.rules import (
    center_of,
    flatten,
    has_center_rule,
    has_flatten_rule,
)
from spatialclust.core.exceptions.models.clusterable import ElementContractError
from spatialclust.core.models.vector import Vector

L = TypeVar("L")


class _ElementAdapter(Generic[L]):
    """Holds one element and forwards center/flatten to the resolved rules."""

    __slots__ = ("_element", "_leaf_type")

    def __init__(self, element: Any, leaf_type: Type[L]) -> None:
        object.__setattr__(self, "_element", element)
        object.__setattr__(self, "_leaf_type", leaf_type)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def center(self) -> Vector:
        return center_of(self._element)

    def type(self) -> type:
        return type(self._element)

    def flatten(self) -> List[L]:
        return flatten(self._element, self._leaf_type)


class Clusterable(Generic[L]):
    """A handle to any element that can be clustered.

    Attributes:
        leaf_type: The type every element flattens down to.

    Example:
        >>> handles = [Clusterable(atom, Atom) for atom in atoms]
        >>> handles.append(Clusterable(atoms[:2], Atom))
        >>> [h.center() for h in handles]
    """

    __slots__ = ("_model",)

    def __init__(self, element: Any, leaf_type: Type[L]) -> None:
        """Wrap an element.

        Args:
            element: The value to wrap. It is not copied and must not be
                mutated while any handle refers to it.
            leaf_type: The leaf type the element flattens to.

        Raises:
            ElementContractError: If no center or no flatten rule resolves
                for the element.
        """
        if isinstance(element, Clusterable):
            element = element._model._element
        if not has_center_rule(element):
            raise ElementContractError(element, "center")
        if not has_flatten_rule(element, leaf_type):
            raise ElementContractError(element, "flatten", leaf_type)
        self._model: _ElementAdapter[L] = _ElementAdapter(element, leaf_type)

    @property
    def leaf_type(self) -> Type[L]:
        return self._model._leaf_type

    @property
    def type_name(self) -> str:
        """Qualified name of the wrapped element's type, for log output."""
        element_type = self.type()
        return f"{element_type.__module__}.{element_type.__qualname__}"

    def center(self) -> Vector:
        """Return the wrapped element's spatial center."""
        return self._model.center()

    def type(self) -> type:
        """Return an identity token for the wrapped element's concrete kind.

        Only meant for diagnostics, clustering never branches on it.
        """
        return self._model.type()

    def flatten(self) -> List[L]:
        """Return the leaves the wrapped element collapses to."""
        return self._model.flatten()

    def shares_element_with(self, other: "Clusterable[Any]") -> bool:
        """Whether two handles alias the same stored element."""
        return self._model is other._model

    def __copy__(self) -> "Clusterable[L]":
        clone = Clusterable.__new__(Clusterable)
        clone._model = self._model
        return clone

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None) -> "Clusterable[L]":
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Clusterable({self.type_name}, leaf_type={self.leaf_type.__name__})"


def wrap_all(elements: Iterable[Any], leaf_type: Type[L]) -> List[Clusterable[L]]:
    """Wrap each element of a collection in its own handle.

    Args:
        elements: Elements of any supported kinds, possibly mixed.
        leaf_type: The leaf type shared by all elements.

    Returns:
        List[Clusterable[L]]: One handle per element, in order.
    """
    return [Clusterable(element, leaf_type) for element in elements]
