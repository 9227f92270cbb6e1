"""Shared fixtures for the spatialclust tests."""

from typing import Callable, List, Sequence

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from spatialclust.core.models.spatial import Atom


class FixedIndexGenerator:
    """Stand-in for ``numpy.random.Generator`` returning preset indices."""

    def __init__(self, indices: Sequence[int]):
        self.indices = list(indices)
        self.calls = []

    def integers(self, low, high, size=None):
        self.calls.append((low, high, size))
        return np.array(self.indices[:size], dtype=np.int64)


@pytest.fixture
def make_atoms() -> Callable[..., List[Atom]]:
    """Build atoms from (x, y, z) tuples."""

    def _make(coordinates, atomic_number: int = 1) -> List[Atom]:
        return [
            Atom(atomic_number=atomic_number, x=x, y=y, z=z)
            for x, y, z in coordinates
        ]

    return _make


@pytest.fixture
def collinear_atoms(make_atoms) -> List[Atom]:
    return make_atoms([(0, 0, 0), (1, 0, 0), (10, 0, 0), (11, 0, 0)])


@pytest.fixture
def random_atoms(make_atoms) -> List[Atom]:
    coordinates = np.random.default_rng(7).normal(size=(30, 3))
    return make_atoms(coordinates.tolist(), atomic_number=6)


@pytest.fixture
def fixed_indices() -> Callable[[Sequence[int]], FixedIndexGenerator]:
    return FixedIndexGenerator

