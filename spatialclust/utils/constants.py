# spatialclust/utils/constants.py
"""
Constants for the package.

This module contains constants used throughout the package.
"""

# Standard Library Imports
from typing import Final, Tuple

# Geometry constants
VECTOR_DIMENSION: Final[int] = 3

# K-means constants
KMEANS_ITERATIONS: Final[int] = 10  # Fixed count, no convergence test
DEFAULT_SEED: Final[int] = 42

# Hierarchical clustering constants (used by scripts/cluster_atoms.py)
META_CLUSTER_THRESHOLD: Final[int] = 10
DEFAULT_META_CLUSTERS: Final[int] = 4

# Unit conversion constants
BOHR_TO_ANGSTROM: Final[float] = 0.52917721067  # CODATA 2014
ANGSTROM_TO_BOHR: Final[float] = 1.0 / BOHR_TO_ANGSTROM

# File format constants
XYZ_EXTENSION: Final[str] = ".xyz"

# Element symbols indexed by atomic number - 1
ELEMENT_SYMBOLS: Final[Tuple[str, ...]] = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
    "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba", "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy",
    "Ho", "Er", "Tm", "Yb", "Lu", "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt",
    "Au", "Hg", "Tl", "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra", "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf",
    "Es", "Fm", "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
    "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)
