"""Conversión entre `Molecule` y objetos `Mol` de RDKit."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from rdkit import Chem
from rdkit.Chem import AllChem

from core.model import Atom, Bond, BondKind
from core.molecule import Molecule

logger = logging.getLogger(__name__)

_TO_RDKIT = {
    BondKind.DUMMY: Chem.BondType.ZERO,
    BondKind.PARTIAL: Chem.BondType.OTHER,
    BondKind.SINGLE: Chem.BondType.SINGLE,
    BondKind.AROMATIC: Chem.BondType.AROMATIC,
    BondKind.DOUBLE: Chem.BondType.DOUBLE,
    BondKind.TRIPLE: Chem.BondType.TRIPLE,
    BondKind.QUADRUPLE: Chem.BondType.QUADRUPLE,
}
_FROM_RDKIT = {value: key for key, value in _TO_RDKIT.items()}


def _ensure_ring_info(mol) -> None:
    if hasattr(Chem, "FastFindRings"):
        Chem.FastFindRings(mol)
    else:
        Chem.GetSymmSSSR(mol)


def molecule_to_rdkit_with_map(mol: Molecule):
    """Convierte una molécula a RDKit.

    Returns:
        Tupla (Mol de RDKit, diccionario sn -> índice de átomo en RDKit).
    """
    rw = Chem.RWMol()
    id_map: Dict[int, int] = {}

    for sn, atom in mol.atoms():
        rd_atom = Chem.Atom(atom.number)
        rd_atom.SetFormalCharge(atom.charge)
        id_map[sn] = rw.AddAtom(rd_atom)

    for sn1, sn2, bond in mol.bonds():
        i, j = id_map[sn1], id_map[sn2]
        if bond.kind == BondKind.AROMATIC:
            rw.GetAtomWithIdx(i).SetIsAromatic(True)
            rw.GetAtomWithIdx(j).SetIsAromatic(True)
        rw.AddBond(i, j, _TO_RDKIT[bond.kind])
        if bond.kind == BondKind.AROMATIC:
            rw.GetBondBetweenAtoms(i, j).SetIsAromatic(True)

    rdmol = rw.GetMol()
    rdmol.UpdatePropertyCache(strict=False)
    _ensure_ring_info(rdmol)
    conf = Chem.Conformer(rdmol.GetNumAtoms())
    for sn, idx in id_map.items():
        conf.SetAtomPosition(idx, mol.get_atom(sn).position)
    rdmol.AddConformer(conf, assignId=True)
    return rdmol, id_map


def molecule_to_rdkit(mol: Molecule):
    rdmol, _ = molecule_to_rdkit_with_map(mol)
    return rdmol


def molecule_to_smiles(mol: Molecule) -> str:
    return Chem.MolToSmiles(molecule_to_rdkit(mol), canonical=True)


def molecule_to_molfile(mol: Molecule) -> str:
    rdmol = molecule_to_rdkit(mol)
    name = mol.title() if mol.name.strip() else ""
    rdmol.SetProp("_Name", name)
    return Chem.MolToMolBlock(rdmol)


def rdkit_to_molecule(rdmol) -> Molecule:
    """Convierte un `Mol` de RDKit en `Molecule`.

    Los números de serie se asignan desde 1 en el orden de átomos de RDKit.
    Si el `Mol` no tiene conformero se calculan coordenadas 2D.

    Raises:
        ValueError: Si `rdmol` es `None` (p. ej., SMILES no válido).
    """
    if rdmol is None:
        raise ValueError("Mol inválido")
    if rdmol.GetNumConformers() == 0:
        AllChem.Compute2DCoords(rdmol)
    conf = rdmol.GetConformer()

    name = rdmol.GetProp("_Name") if rdmol.HasProp("_Name") else ""
    mol = Molecule(name)
    for rd_atom in rdmol.GetAtoms():
        idx = rd_atom.GetIdx()
        pos = conf.GetAtomPosition(idx)
        atom = Atom(
            symbol=rd_atom.GetSymbol(),
            position=(pos.x, pos.y, pos.z),
            charge=rd_atom.GetFormalCharge(),
        )
        mol.add_atom(idx + 1, atom)

    for rd_bond in rdmol.GetBonds():
        if rd_bond.GetIsAromatic():
            kind = BondKind.AROMATIC
        else:
            kind = _FROM_RDKIT.get(rd_bond.GetBondType(), BondKind.SINGLE)
        mol.add_bond(rd_bond.GetBeginAtomIdx() + 1, rd_bond.GetEndAtomIdx() + 1, Bond(kind))

    logger.debug("converted RDKit Mol into %r", mol)
    return mol


def smiles_to_molecule(smiles: str) -> Molecule:
    return rdkit_to_molecule(Chem.MolFromSmiles(smiles))


def molfile_to_molecule(molfile: str) -> Molecule:
    return rdkit_to_molecule(Chem.MolFromMolBlock(molfile, sanitize=True))
