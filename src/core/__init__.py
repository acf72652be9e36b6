"""API pública del núcleo químico.

Reexpone el modelo molecular para facilitar importaciones.
"""

from core.errors import (
    InvalidNodeIndex,
    InvalidSerialNumber,
    MappingConflict,
    MissingEdge,
    MoleculeError,
)
from core.graph import GraphStore
from core.lattice import Lattice
from core.model import Atom, Bond, BondKind
from core.molecule import Molecule
from core.properties import PropertyStore

__all__ = [
    "Atom",
    "Bond",
    "BondKind",
    "GraphStore",
    "Lattice",
    "Molecule",
    "PropertyStore",
    "MoleculeError",
    "InvalidSerialNumber",
    "InvalidNodeIndex",
    "MissingEdge",
    "MappingConflict",
]
