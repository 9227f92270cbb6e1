# spatialclust/data/loaders/xyz.py
"""
Loader for XYZ molecular geometry files.

The format is a count line, a free-form comment line, then one
``symbol x y z`` row per atom with coordinates in Angstrom. Atoms are
returned with coordinates in Bohr.

Methods:
    read_xyz: Parse xyz content from a text stream.
    load_atoms: Load atoms from a file, checking its extension.
"""

# Standard Library Imports
from pathlib import Path
from typing import Dict, List, TextIO, Union

# Internal Imports
from spatialclust.core.exceptions.data.loaders import (
    UnsupportedFormatError,
    XYZFormatError,
)
from spatialclust.core.models.spatial.atom import Atom
from spatialclust.utils.constants import (
    ANGSTROM_TO_BOHR,
    ELEMENT_SYMBOLS,
    XYZ_EXTENSION,
)
from spatialclust.utils.logging import get_logger

# Initialize logger
logger = get_logger(__name__)

_ATOMIC_NUMBERS: Dict[str, int] = {
    symbol.lower(): number for number, symbol in enumerate(ELEMENT_SYMBOLS, start=1)
}


def _atomic_number(symbol: str) -> int:
    try:
        return _ATOMIC_NUMBERS[symbol.lower()]
    except KeyError:
        raise XYZFormatError(f"Unknown element symbol '{symbol}'.") from None


def read_xyz(stream: TextIO, to_bohr: bool = True) -> List[Atom]:
    """Parse atoms from xyz formatted text.

    Args:
        stream: Text stream positioned at the count line.
        to_bohr: Convert Angstrom coordinates to Bohr (default: True).

    Returns:
        List[Atom]: The atoms in file order.

    Raises:
        XYZFormatError: If the content is malformed.
    """
    lines = stream.read().splitlines()
    if not lines:
        raise XYZFormatError("Empty xyz content.")

    try:
        natoms = int(lines[0].strip())
    except ValueError:
        raise XYZFormatError(
            f"Expected the atom count on the first line, got '{lines[0]}'."
        ) from None

    rows = lines[2 : 2 + natoms]
    if len(rows) < natoms:
        raise XYZFormatError(f"Expected {natoms} atoms, found {len(rows)}.")

    scale = ANGSTROM_TO_BOHR if to_bohr else 1.0
    atoms: List[Atom] = []
    for line_number, row in enumerate(rows, start=3):
        fields = row.split()
        if len(fields) < 4:
            raise XYZFormatError(f"Line {line_number}: expected 'symbol x y z'.")
        try:
            x, y, z = (float(value) * scale for value in fields[1:4])
        except ValueError:
            raise XYZFormatError(
                f"Line {line_number}: invalid coordinates {fields[1:4]}."
            ) from None
        atoms.append(Atom(atomic_number=_atomic_number(fields[0]), x=x, y=y, z=z))

    return atoms


def load_atoms(filename: Union[str, Path], to_bohr: bool = True) -> List[Atom]:
    """Load atoms from a geometry file.

    Args:
        filename: Path to the file. Only ``.xyz`` files are supported.
        to_bohr: Convert Angstrom coordinates to Bohr (default: True).

    Returns:
        List[Atom]: The loaded atoms.

    Raises:
        UnsupportedFormatError: If the file extension is not supported.
        FileNotFoundError: If the file does not exist.
        XYZFormatError: If the content is malformed.
    """
    path = Path(filename)
    if path.suffix.lower() != XYZ_EXTENSION:
        raise UnsupportedFormatError(str(path), XYZ_EXTENSION)
    if not path.exists():
        raise FileNotFoundError(f"File {path} does not exist.")

    with open(path, "r") as f:
        atoms = read_xyz(f, to_bohr=to_bohr)

    logger.info(f"Loaded {len(atoms)} atoms from {path}")
    return atoms
