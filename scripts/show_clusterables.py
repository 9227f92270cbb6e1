# scripts/show_clusterables.py
"""
Script showing how different kinds of elements share one Clusterable handle.

A single atom, a list of atoms, a nested list of atoms, and a Molecule class
with registered rules are wrapped in handles. Each handle's stored type,
center, and leaf atoms are then logged.

Example usage:
    python scripts/show_clusterables.py --log-level INFO
"""

import argparse
import sys
from typing import List, Optional, Sequence

from spatialclust.core.clusterable import (
    Clusterable,
    center_of,
    register_center,
    register_flatten,
)
from spatialclust.core.models.spatial import Atom
from spatialclust.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


class Molecule:
    """A collection of atoms that knows nothing about clustering."""

    def __init__(self, atoms: Sequence[Atom]):
        self.atoms = list(atoms)


@register_center(Molecule)
def _(molecule: Molecule):
    return center_of(molecule.atoms)


@register_flatten(Molecule)
def _(molecule: Molecule, leaf_type: type) -> List[Atom]:
    return list(molecule.atoms)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Wrap different element kinds and show their type, center and atoms",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return parser.parse_args(argv)


def build_handles() -> List[Clusterable[Atom]]:
    """Wrap one element of each supported kind."""
    single = Clusterable(Atom(atomic_number=8), Atom)
    pair = Clusterable(
        [Atom(atomic_number=1, x=1.0), Atom(atomic_number=1, x=-1.0)], Atom
    )
    nested = Clusterable([single.flatten(), pair.flatten()], Atom)
    molecule = Clusterable(
        Molecule(Atom(atomic_number=6, x=float(i), y=1.0) for i in range(4)), Atom
    )
    return [single, pair, nested, molecule]


def describe(handles: Sequence[Clusterable[Atom]]) -> None:
    """Log the stored type, center and leaf atoms of each handle."""
    for n, handle in enumerate(handles, start=1):
        logger.info(f"Clusterable {n}")
        logger.info(f"\tstored type: {handle.type_name}")
        logger.info(f"\tcenter: {handle.center()}")
        logger.info("\tAtoms:")
        for atom in handle.flatten():
            logger.info(f"\t\t{atom}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build and describe one handle per element kind."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        describe(build_handles())
    except Exception as e:
        logger.error(f"Error describing clusterables: {str(e)}")
        logger.exception(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
