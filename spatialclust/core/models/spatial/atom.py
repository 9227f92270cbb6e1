"""Atom model, the leaf element of molecular clustering."""

# Third Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from spatialclust.core.clusterable.rules import register_center
from spatialclust.core.models.vector import Vector, as_vector
from spatialclust.utils.constants import ELEMENT_SYMBOLS


class Atom(BaseModel):
    """A single atom with Cartesian coordinates in Bohr.

    Attributes:
        atomic_number: Nuclear charge of the atom
        x: x coordinate
        y: y coordinate
        z: z coordinate
    """

    model_config = ConfigDict(frozen=True)

    atomic_number: int = Field(default=0, ge=0, description="Nuclear charge.")
    x: float = Field(default=0.0, description="x coordinate in Bohr.")
    y: float = Field(default=0.0, description="y coordinate in Bohr.")
    z: float = Field(default=0.0, description="z coordinate in Bohr.")

    @property
    def symbol(self) -> str:
        """Element symbol, or ``"X"`` for ghost and unknown atoms."""
        if 1 <= self.atomic_number <= len(ELEMENT_SYMBOLS):
            return ELEMENT_SYMBOLS[self.atomic_number - 1]
        return "X"

    def __str__(self) -> str:
        return f"{self.symbol} {self.x:.6f} {self.y:.6f} {self.z:.6f}"


@register_center(Atom)
def atom_center(atom: Atom) -> Vector:
    """Position of an atom."""
    return as_vector((atom.x, atom.y, atom.z))
