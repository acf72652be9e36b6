"""Molécula representada como grafo y direccionada por número de serie.

`Molecule` combina un `GraphStore` (átomos como nodos, enlaces como aristas)
con un `IdentityMap` que traduce los números de serie visibles para el
usuario a índices internos del grafo. Los índices de nodo se reciclan al
eliminar átomos, por lo que el mapeo se actualiza en la misma operación que
el grafo: primero se elimina la entrada del mapeo y luego el nodo, o primero
se crea el nodo y luego la entrada.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from chemcalc.formula import get_reduced_formula, reduced_symbols
from chemcalc.options import FormulaOptions
from core.errors import InvalidNodeIndex, InvalidSerialNumber
from core.graph import GraphStore, NodeIndex
from core.lattice import Lattice
from core.mapping import IdentityMap
from core.model import Atom, Bond, Point3
from core.properties import PropertyStore

logger = logging.getLogger(__name__)

# Título devuelto cuando el nombre está vacío.
DEFAULT_TITLE = "untitled"


class Molecule:
    """Entidad química con átomos direccionados por número de serie.

    Attributes:
        properties: Propiedades arbitrarias clave/valor.
        lattice: Celda cristalina para estructuras periódicas, o `None`.
    """

    def __init__(self, name: str = "") -> None:
        """Crea una molécula vacía con nombre opcional."""
        self.properties = PropertyStore()
        self.lattice: Optional[Lattice] = None
        self._name = name
        self._graph = GraphStore()
        self._mapping = IdentityMap()

    def __repr__(self) -> str:
        return f"Molecule({self.title()!r}, natoms={self.natoms()}, nbonds={self.nbonds()})"

    # ------------------------------------------------------------------
    # Constructores
    # ------------------------------------------------------------------
    @classmethod
    def from_atoms(cls, atoms: Iterable[Atom]) -> "Molecule":
        """Construye una molécula numerando los átomos desde 1."""
        mol = cls()
        for sn, atom in enumerate(atoms, start=1):
            mol.add_atom(sn, atom)
        return mol

    @classmethod
    def from_graph(cls, graph: GraphStore) -> "Molecule":
        """Construye una molécula a partir de un `GraphStore` ya poblado.

        Los números de serie se asignan desde 1 siguiendo el orden en que el
        grafo enumera sus nodos.

        Args:
            graph: Grafo con átomos como nodos y enlaces como aristas. La
                molécula guarda su propia copia de la estructura, así que
                modificar `graph` después no altera la molécula.

        Returns:
            La molécula construida.
        """
        mol = cls()
        mol._graph = graph.copy()
        for sn, index in enumerate(mol._graph.node_indices(), start=1):
            mol._mapping.insert_no_overwrite(sn, index)
        logger.debug("adopted graph with %d atoms and %d bonds", mol.natoms(), mol.nbonds())
        return mol

    # ------------------------------------------------------------------
    # Traducción interna número de serie <-> índice
    # ------------------------------------------------------------------
    def _node_index(self, sn: int) -> NodeIndex:
        index = self._mapping.get_handle(sn)
        if index is None:
            raise InvalidSerialNumber(sn)
        return index

    def _atom_sn(self, index: NodeIndex) -> int:
        sn = self._mapping.get_serial(index)
        if sn is None:
            raise InvalidNodeIndex(index)
        return sn

    # ------------------------------------------------------------------
    # Operaciones básicas
    # ------------------------------------------------------------------
    def add_atom(self, sn: int, atom: Atom) -> None:
        """Agrega `atom` con número de serie `sn`.

        Si `sn` ya existe, el átomo almacenado se reemplaza sin cambiar su
        índice de nodo ni sus enlaces.
        """
        index = self._mapping.get_handle(sn)
        if index is not None:
            self._graph.set_node_value(index, atom)
            return
        index = self._graph.add_node(atom)
        self._mapping.insert_no_overwrite(sn, index)

    def remove_atom(self, sn: int) -> Optional[Atom]:
        """Elimina el átomo `sn` junto con sus enlaces.

        Returns:
            El átomo eliminado, o `None` si `sn` no existe.
        """
        index = self._mapping.remove(sn)
        if index is None:
            return None
        logger.debug("removing atom sn %d (node %d)", sn, index)
        return self._graph.remove_node(index)

    def natoms(self) -> int:
        return self._graph.number_of_nodes()

    def nbonds(self) -> int:
        return self._graph.number_of_edges()

    def add_bond(self, a: int, b: int, bond: Bond) -> None:
        """Agrega `bond` entre los átomos `a` y `b`, reemplazando el existente.

        Raises:
            InvalidSerialNumber: Si `a` o `b` no existen.
        """
        na = self._node_index(a)
        nb = self._node_index(b)
        self._graph.add_edge(na, nb, bond)

    def remove_bond(self, a: int, b: int) -> Optional[Bond]:
        """Elimina el enlace entre `a` y `b`.

        Returns:
            El enlace eliminado, o `None` si los átomos no estaban enlazados.

        Raises:
            InvalidSerialNumber: Si `a` o `b` no existen.
        """
        na = self._node_index(a)
        nb = self._node_index(b)
        return self._graph.remove_edge(na, nb)

    def clear(self) -> None:
        """Elimina todos los átomos y enlaces."""
        self._mapping.clear()
        self._graph.clear()
        logger.debug("molecule %r cleared", self.title())

    # ------------------------------------------------------------------
    # Iteración
    # ------------------------------------------------------------------
    def serial_numbers(self) -> Iterator[int]:
        """Itera los números de serie en orden ascendente."""
        return iter(self._mapping.serials_ascending())

    def atoms(self) -> Iterator[Tuple[int, Atom]]:
        """Itera pares (sn, átomo) ordenados por número de serie."""
        for sn in self.serial_numbers():
            yield sn, self._graph.node_value(self._node_index(sn))

    def bonds(self) -> Iterator[Tuple[int, int, Bond]]:
        """Itera tripletas (sn1, sn2, enlace) en orden arbitrario."""
        for n1, n2, bond in self._graph.edges():
            yield self._atom_sn(n1), self._atom_sn(n2), bond

    def symbols(self) -> Iterator[str]:
        for _, atom in self.atoms():
            yield atom.symbol

    def atomic_numbers(self) -> Iterator[int]:
        for _, atom in self.atoms():
            yield atom.number

    def positions(self) -> Iterator[Point3]:
        for _, atom in self.atoms():
            yield atom.position

    # ------------------------------------------------------------------
    # Título
    # ------------------------------------------------------------------
    @property
    def name(self) -> str:
        """Nombre completo almacenado, sin normalizar."""
        return self._name

    def title(self) -> str:
        """Devuelve la primera línea no vacía del nombre, sin espacios.

        Returns:
            El título, o `DEFAULT_TITLE` si el nombre está vacío.
        """
        for line in self._name.split("\n"):
            line = line.strip()
            if line:
                return line
        return DEFAULT_TITLE

    def set_title(self, title: str) -> None:
        self._name = str(title)

    # ------------------------------------------------------------------
    # Edición
    # ------------------------------------------------------------------
    def get_atom(self, sn: int) -> Optional[Atom]:
        """Acceso al átomo `sn`, o `None` si no existe.

        El objeto devuelto es el almacenado en el grafo; modificarlo modifica
        la molécula.
        """
        index = self._mapping.get_handle(sn)
        if index is None:
            return None
        return self._graph.node_value(index)

    # Los objetos Python siempre son mutables; se conserva el nombre.
    get_atom_mut = get_atom

    def get_bond(self, sn1: int, sn2: int) -> Optional[Bond]:
        """Acceso al enlace entre `sn1` y `sn2`.

        Returns:
            El enlace, o `None` si algún átomo no existe o no están enlazados.
        """
        n1 = self._mapping.get_handle(sn1)
        n2 = self._mapping.get_handle(sn2)
        if n1 is None or n2 is None or not self._graph.has_edge(n1, n2):
            return None
        return self._graph.edge_value(n1, n2)

    get_bond_mut = get_bond

    def set_position(self, sn: int, position: Sequence[float]) -> None:
        """Fija la posición del átomo `sn`.

        Raises:
            InvalidSerialNumber: Si el átomo `sn` no existe.
        """
        self._require_atom(sn).set_position(position)

    def set_symbol(self, sn: int, symbol: Union[str, int]) -> None:
        """Fija el elemento del átomo `sn`.

        Raises:
            InvalidSerialNumber: Si el átomo `sn` no existe.
        """
        self._require_atom(sn).set_symbol(symbol)

    def _require_atom(self, sn: int) -> Atom:
        return self._graph.node_value(self._node_index(sn))

    # ------------------------------------------------------------------
    # Edición en bloque
    # ------------------------------------------------------------------
    def add_atoms_from(self, atoms: Iterable[Tuple[int, Atom]]) -> None:
        """Agrega pares (sn, átomo) en orden; no hay reversión parcial."""
        for sn, atom in atoms:
            self.add_atom(sn, atom)

    def add_bonds_from(self, bonds: Iterable[Tuple[int, int, Bond]]) -> None:
        """Agrega tripletas (sn1, sn2, enlace) en orden.

        Raises:
            InvalidSerialNumber: En el primer extremo inexistente; los
                enlaces anteriores quedan aplicados.
        """
        for a, b, bond in bonds:
            self.add_bond(a, b, bond)

    def remove_atoms_from(self, serials: Iterable[int]) -> List[Optional[Atom]]:
        """Elimina varios átomos y devuelve lo eliminado, en el mismo orden."""
        return [self.remove_atom(sn) for sn in serials]

    def remove_bonds_from(self, pairs: Iterable[Tuple[int, int]]) -> List[Optional[Bond]]:
        """Elimina varios enlaces con la semántica de `remove_bond`."""
        return [self.remove_bond(a, b) for a, b in pairs]

    def set_positions(self, positions: Iterable[Sequence[float]]) -> None:
        """Fija posiciones en orden de número de serie.

        Los valores sobrantes se ignoran; si faltan, solo se actualizan los
        primeros átomos.
        """
        for (_, atom), position in zip(self.atoms(), positions):
            atom.set_position(position)

    def update_positions(self, positions: Iterable[Sequence[float]]) -> None:
        """Como `set_positions`, pero sin tocar las coordenadas congeladas."""
        for (_, atom), position in zip(self.atoms(), positions):
            atom.update_position(position)

    def set_positions_from(self, selected: Iterable[Tuple[int, Sequence[float]]]) -> None:
        """Fija posiciones de átomos concretos a partir de pares (sn, posición)."""
        for sn, position in selected:
            self.set_position(sn, position)

    def set_symbols(self, symbols: Iterable[Union[str, int]]) -> None:
        for (_, atom), symbol in zip(self.atoms(), symbols):
            atom.set_symbol(symbol)

    # ------------------------------------------------------------------
    # Fórmula y periodicidad
    # ------------------------------------------------------------------
    def formula(self, options: Optional[FormulaOptions] = None) -> str:
        """Fórmula reducida de la molécula; "" si no tiene átomos."""
        return get_reduced_formula(self.symbols(), options)

    def reduced_symbols(self) -> Dict[str, int]:
        return reduced_symbols(self.symbols())

    def is_periodic(self) -> bool:
        return self.lattice is not None
