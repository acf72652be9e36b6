"""Persistencia de moléculas en documentos JSON.

Este módulo serializa y deserializa `Molecule` conservando los números de
serie de los átomos, el título, la celda cristalina y las propiedades.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from core.lattice import Lattice
from core.model import Atom, Bond, BondKind
from core.molecule import Molecule
from core.properties import PropertyStore

logger = logging.getLogger(__name__)


class PersistenceManager:
    """Gestiona el guardado y carga de moléculas en archivos JSON."""

    APPLICATION = "chemgraph"
    VERSION = "0.1.0"

    @staticmethod
    def save_to_dict(mol: Molecule) -> Dict[str, Any]:
        """Serializa la molécula en un diccionario.

        Args:
            mol: Molécula a serializar.

        Returns:
            Diccionario serializable con átomos, enlaces y metadatos.

        Side Effects:
            No tiene efectos laterales; solo lee el estado de la molécula.
        """
        # 1. Átomos en orden de número de serie
        atoms_data = []
        for sn, atom in mol.atoms():
            atoms_data.append({
                "sn": sn,
                "symbol": atom.symbol,
                "position": list(atom.position),
                "charge": atom.charge,
                "label": atom.label,
                "freezing": list(atom.freezing),
            })

        # 2. Enlaces por pares de números de serie
        bonds_data = []
        for sn1, sn2, bond in mol.bonds():
            bonds_data.append({
                "a1": sn1,
                "a2": sn2,
                "kind": bond.kind.value,
                "label": bond.label,
            })

        lattice_data = None
        if mol.lattice is not None:
            lattice_data = [list(v) for v in mol.lattice.vectors()]

        return {
            "application": PersistenceManager.APPLICATION,
            "version": PersistenceManager.VERSION,
            "name": mol.name,
            "atoms": atoms_data,
            "bonds": bonds_data,
            "lattice": lattice_data,
            "properties": mol.properties.to_dict(),
        }

    @staticmethod
    def load_from_dict(data: Dict[str, Any]) -> Molecule:
        """Reconstruye una molécula desde un diccionario.

        Args:
            data: Diccionario de estado (resultado de `save_to_dict`).

        Returns:
            La molécula reconstruida con los mismos números de serie.

        Raises:
            ValueError: Si el documento no corresponde a una molécula.
            InvalidSerialNumber: Si un enlace referencia un átomo ausente.
        """
        if data.get("application") != PersistenceManager.APPLICATION:
            raise ValueError("Not a valid chemgraph document")
        if data.get("version") != PersistenceManager.VERSION:
            logger.warning(
                "loading document version %s with reader %s",
                data.get("version"),
                PersistenceManager.VERSION,
            )

        mol = Molecule(data.get("name", ""))
        for atom_d in data.get("atoms", []):
            atom = Atom(
                symbol=atom_d["symbol"],
                position=atom_d.get("position", (0.0, 0.0, 0.0)),
                charge=atom_d.get("charge", 0),
                label=atom_d.get("label", ""),
                freezing=atom_d.get("freezing", [False, False, False]),
            )
            mol.add_atom(atom_d["sn"], atom)

        for bond_d in data.get("bonds", []):
            bond = Bond(BondKind(bond_d.get("kind", "single")), bond_d.get("label", ""))
            mol.add_bond(bond_d["a1"], bond_d["a2"], bond)

        lattice_data = data.get("lattice")
        if lattice_data is not None:
            mol.lattice = Lattice.from_vectors(lattice_data)
        mol.properties = PropertyStore.from_dict(data.get("properties", {}))
        return mol

    @staticmethod
    def save_to_file(filepath: str, mol: Molecule) -> None:
        """Guarda la molécula en un archivo JSON.

        Side Effects:
            Escribe en disco el archivo indicado.
        """
        data = PersistenceManager.save_to_dict(mol)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("saved %r to %s", mol.title(), filepath)

    @staticmethod
    def load_from_file(filepath: str) -> Molecule:
        """Carga una molécula desde un archivo JSON."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("loaded document from %s", filepath)
        return PersistenceManager.load_from_dict(data)
