"""Helpers shared by test modules."""

from typing import Iterable, List


def coordinates_of(atoms: Iterable) -> List[tuple]:
    """Sorted coordinate tuples, for comparing leaf multisets."""
    return sorted((atom.x, atom.y, atom.z) for atom in atoms)
