"""Pruebas unitarias para test_molecule."""

import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from core.errors import InvalidSerialNumber
from core.graph import GraphStore
from core.lattice import Lattice
from core.model import Atom, Bond
from core.molecule import Molecule


def _ethane_skeleton():
    """Función de prueba auxiliar: tres carbonos numerados 1..3."""
    return Molecule.from_atoms([Atom("C"), Atom("C"), Atom("C")])


class MoleculeBasicTest(unittest.TestCase):
    """Casos de prueba para las operaciones básicas de Molecule."""

    def test_add_atoms_and_bonds(self):
        """Verifica add atoms and bonds.

        Returns:
            None.

        """
        mol = Molecule("test")
        for i in range(5):
            mol.add_atom(i, Atom())
        self.assertEqual(mol.natoms(), 5)

        mol.add_bond(1, 2, Bond.single())
        mol.add_bond(2, 3, Bond.double())
        self.assertEqual(mol.nbonds(), 2)
        mol.add_bond(2, 1, Bond.single())
        self.assertEqual(mol.nbonds(), 2)

    def test_readd_replaces_atom(self):
        """Verifica readd replaces atom.

        Returns:
            None.

        """
        mol = Molecule()
        mol.add_atom(5, Atom("C"))
        mol.add_atom(6, Atom("O"))
        mol.add_bond(5, 6, Bond.double())
        y = Atom("N")
        mol.add_atom(5, y)
        self.assertIs(mol.get_atom(5), y)
        self.assertEqual(mol.natoms(), 2)
        # El enlace sobrevive porque el nodo no cambia.
        self.assertEqual(mol.get_bond(5, 6).order, 2.0)

    def test_remove_atom(self):
        mol = _ethane_skeleton()
        mol.add_bond(1, 2, Bond.single())
        mol.add_bond(2, 3, Bond.single())
        removed = mol.remove_atom(2)
        self.assertEqual(removed.symbol, "C")
        self.assertEqual(mol.natoms(), 2)
        self.assertEqual(mol.nbonds(), 0)
        self.assertIsNone(mol.remove_atom(2))
        self.assertEqual(list(mol.serial_numbers()), [1, 3])

    def test_removed_handle_does_not_alias_new_atom(self):
        """Verifica que un índice reciclado no se asocie al número de serie viejo.

        Returns:
            None.

        """
        mol = Molecule()
        mol.add_atom(1, Atom("C"))
        mol.add_atom(2, Atom("O"))
        mol.add_atom(3, Atom("N"))
        mol.remove_atom(2)
        mol.add_atom(10, Atom("S"))

        self.assertIsNone(mol.get_atom(2))
        self.assertEqual(mol.get_atom(10).symbol, "S")
        self.assertEqual(mol.get_atom(1).symbol, "C")
        self.assertEqual(mol.get_atom(3).symbol, "N")
        self.assertEqual(list(mol.serial_numbers()), [1, 3, 10])
        self.assertEqual(mol.natoms(), 3)

    def test_bijection_after_mixed_mutations(self):
        mol = Molecule()
        for sn in range(1, 9):
            mol.add_atom(sn, Atom("C", (float(sn), 0.0, 0.0)))
        for sn in (2, 4, 6):
            mol.remove_atom(sn)
        for sn in (4, 20):
            mol.add_atom(sn, Atom("O", (float(sn), 0.0, 0.0)))

        serials = list(mol.serial_numbers())
        self.assertEqual(serials, [1, 3, 4, 5, 7, 8, 20])
        self.assertEqual(len(serials), mol.natoms())
        for sn, atom in mol.atoms():
            self.assertEqual(atom.position[0], float(sn))

    def test_clear_is_idempotent(self):
        """Verifica clear is idempotent.

        Returns:
            None.

        """
        mol = _ethane_skeleton()
        mol.add_bond(1, 2, Bond.single())
        mol.clear()
        self.assertEqual(mol.natoms(), 0)
        self.assertEqual(mol.nbonds(), 0)
        self.assertEqual(list(mol.serial_numbers()), [])
        mol.clear()
        self.assertEqual(mol.natoms(), 0)
        self.assertEqual(list(mol.atoms()), [])

        mol.add_atom(1, Atom("H"))
        self.assertEqual(list(mol.symbols()), ["H"])


class MoleculeIterationTest(unittest.TestCase):
    """Casos de prueba para la iteración ordenada."""

    def test_atoms_ascending_and_restartable(self):
        """Verifica atoms ascending and restartable.

        Returns:
            None.

        """
        mol = Molecule()
        mol.add_atom(5, Atom("O"))
        mol.add_atom(1, Atom("C"))
        mol.add_atom(3, Atom("N"))

        first = [(sn, atom.symbol) for sn, atom in mol.atoms()]
        second = [(sn, atom.symbol) for sn, atom in mol.atoms()]
        self.assertEqual(first, [(1, "C"), (3, "N"), (5, "O")])
        self.assertEqual(first, second)
        self.assertEqual(list(mol.symbols()), ["C", "N", "O"])
        self.assertEqual(list(mol.atomic_numbers()), [6, 7, 8])

    def test_bonds_report_serial_numbers(self):
        mol = Molecule()
        mol.add_atom(10, Atom("C"))
        mol.add_atom(20, Atom("O"))
        mol.add_atom(30, Atom("H"))
        mol.add_bond(10, 20, Bond.double())
        mol.add_bond(30, 10, Bond.single())

        pairs = {frozenset((a, b)): bond.order for a, b, bond in mol.bonds()}
        self.assertEqual(pairs, {frozenset((10, 20)): 2.0, frozenset((10, 30)): 1.0})
        self.assertEqual(len(list(mol.bonds())), 2)

    def test_positions(self):
        mol = Molecule.from_atoms([Atom("C", (0.0, 0.0, 0.0)), Atom("O", (1.2, 0.0, 0.0))])
        self.assertEqual(list(mol.positions()), [(0.0, 0.0, 0.0), (1.2, 0.0, 0.0)])

    def test_from_graph_numbers_nodes(self):
        """Verifica from graph numbers nodes.

        Returns:
            None.

        """
        graph = GraphStore()
        n1 = graph.add_node(Atom("O"))
        n2 = graph.add_node(Atom("H"))
        n3 = graph.add_node(Atom("H"))
        graph.add_edge(n1, n2, Bond.single())
        graph.add_edge(n1, n3, Bond.single())

        mol = Molecule.from_graph(graph)
        self.assertEqual(list(mol.serial_numbers()), [1, 2, 3])
        self.assertEqual(list(mol.symbols()), ["O", "H", "H"])
        self.assertEqual(mol.nbonds(), 2)
        self.assertIsNotNone(mol.get_bond(1, 3))

    def test_from_graph_is_independent_of_source(self):
        """Verifica que modificar el grafo de origen no altere la molécula.

        Returns:
            None.

        """
        graph = GraphStore()
        n1 = graph.add_node(Atom("C"))
        mol = Molecule.from_graph(graph)

        n2 = graph.add_node(Atom("O"))
        graph.add_edge(n1, n2, Bond.double())
        graph.remove_node(n1)

        self.assertEqual(mol.natoms(), len(list(mol.serial_numbers())))
        self.assertEqual(list(mol.symbols()), ["C"])
        self.assertEqual(mol.nbonds(), 0)
        mol.add_atom(2, Atom("N"))
        self.assertEqual(list(mol.symbols()), ["C", "N"])


class MoleculeTitleTest(unittest.TestCase):
    """Casos de prueba para title y set_title."""

    def test_title_fallback(self):
        mol = Molecule()
        self.assertEqual(mol.title(), "untitled")
        mol.set_title("")
        self.assertEqual(mol.title(), "untitled")
        mol.set_title("   \n  ")
        self.assertEqual(mol.title(), "untitled")

    def test_title_first_line(self):
        mol = Molecule()
        mol.set_title("  My Mol \nSecondLine")
        self.assertEqual(mol.title(), "My Mol")
        mol.set_title("\n  water\n")
        self.assertEqual(mol.title(), "water")
        self.assertEqual(mol.name, "\n  water\n")

    def test_title_splits_on_newline_only(self):
        mol = Molecule("Mol\x1cA\r\nB")
        self.assertEqual(mol.title(), "Mol\x1cA")
        mol.set_title("a\u2028b")
        self.assertEqual(mol.title(), "a\u2028b")


class MoleculeEditTest(unittest.TestCase):
    """Casos de prueba para la edición de átomos y enlaces."""

    def test_get_atom_and_bond_absent(self):
        mol = _ethane_skeleton()
        self.assertIsNone(mol.get_atom(99))
        self.assertIsNone(mol.get_bond(1, 99))
        self.assertIsNone(mol.get_bond(1, 2))
        mol.add_bond(1, 2, Bond.single())
        self.assertIsNotNone(mol.get_bond(2, 1))

    def test_mutable_access(self):
        mol = _ethane_skeleton()
        mol.add_bond(1, 2, Bond.single())
        mol.get_atom_mut(1).set_symbol("N")
        mol.get_bond_mut(1, 2).kind = Bond.triple().kind
        self.assertEqual(mol.get_atom(1).symbol, "N")
        self.assertEqual(mol.get_bond(1, 2).order, 3.0)

    def test_invalid_serial_is_fatal(self):
        """Verifica invalid serial is fatal.

        Returns:
            None.

        """
        mol = _ethane_skeleton()
        with self.assertRaises(InvalidSerialNumber):
            mol.add_bond(1, 4, Bond.single())
        with self.assertRaises(InvalidSerialNumber):
            mol.remove_bond(4, 1)
        with self.assertRaises(InvalidSerialNumber):
            mol.set_position(4, (0.0, 0.0, 0.0))
        with self.assertRaises(InvalidSerialNumber) as ctx:
            mol.set_symbol(4, "O")
        self.assertIn("4", str(ctx.exception))
        self.assertEqual(mol.nbonds(), 0)

    def test_remove_bond(self):
        mol = _ethane_skeleton()
        mol.add_bond(1, 2, Bond.double())
        self.assertIsNone(mol.remove_bond(2, 3))
        self.assertEqual(mol.remove_bond(2, 1).order, 2.0)
        self.assertEqual(mol.nbonds(), 0)

    def test_set_position_and_symbol(self):
        mol = _ethane_skeleton()
        mol.set_position(2, [1.0, 2.0, 3.0])
        mol.set_symbol(3, 8)
        self.assertEqual(mol.get_atom(2).position, (1.0, 2.0, 3.0))
        self.assertEqual(mol.get_atom(3).symbol, "O")


class MoleculeBulkEditTest(unittest.TestCase):
    """Casos de prueba para la edición en bloque."""

    def test_add_atoms_and_bonds_from(self):
        mol = Molecule()
        mol.add_atoms_from([(1, Atom("C")), (2, Atom("O")), (3, Atom("O"))])
        mol.add_bonds_from([(1, 2, Bond.double()), (1, 3, Bond.double())])
        self.assertEqual(mol.natoms(), 3)
        self.assertEqual(mol.nbonds(), 2)
        self.assertEqual(mol.formula(), "CO2")

    def test_add_bonds_from_has_no_rollback(self):
        """Verifica add bonds from has no rollback.

        Returns:
            None.

        """
        mol = _ethane_skeleton()
        with self.assertRaises(InvalidSerialNumber):
            mol.add_bonds_from([(1, 2, Bond.single()), (2, 9, Bond.single()), (2, 3, Bond.single())])
        self.assertEqual(mol.nbonds(), 1)
        self.assertIsNotNone(mol.get_bond(1, 2))

    def test_remove_atoms_and_bonds_from(self):
        mol = _ethane_skeleton()
        mol.add_bonds_from([(1, 2, Bond.single()), (2, 3, Bond.single())])
        removed = mol.remove_bonds_from([(1, 2), (1, 3)])
        self.assertEqual(removed[0].order, 1.0)
        self.assertIsNone(removed[1])
        self.assertEqual(mol.nbonds(), 1)

        atoms = mol.remove_atoms_from([3, 7])
        self.assertEqual(atoms[0].symbol, "C")
        self.assertIsNone(atoms[1])
        self.assertEqual(list(mol.serial_numbers()), [1, 2])
        self.assertEqual(mol.nbonds(), 0)

    def test_set_positions_follows_serial_order(self):
        """Verifica set positions follows serial order.

        Returns:
            None.

        """
        mol = Molecule()
        mol.add_atom(3, Atom("O"))
        mol.add_atom(1, Atom("C"))
        mol.add_atom(2, Atom("N"))

        mol.set_positions([(1.0, 0.0, 0.0), (2.0, 0.0, 0.0)])
        self.assertEqual(mol.get_atom(1).position, (1.0, 0.0, 0.0))
        self.assertEqual(mol.get_atom(2).position, (2.0, 0.0, 0.0))
        self.assertEqual(mol.get_atom(3).position, (0.0, 0.0, 0.0))

        mol.set_positions([(float(i), 1.0, 1.0) for i in range(10)])
        self.assertEqual(list(mol.positions())[-1], (2.0, 1.0, 1.0))

    def test_update_positions_keeps_frozen_axes(self):
        mol = Molecule()
        mol.add_atom(1, Atom("C", freezing=[True, True, True]))
        mol.add_atom(2, Atom("O", freezing=[False, True, False]))

        mol.update_positions([(1.0, 1.0, 1.0), (2.0, 2.0, 2.0)])
        self.assertEqual(mol.get_atom(1).position, (0.0, 0.0, 0.0))
        self.assertEqual(mol.get_atom(2).position, (2.0, 0.0, 2.0))

        mol.set_positions([(1.0, 1.0, 1.0), (2.0, 2.0, 2.0)])
        self.assertEqual(mol.get_atom(1).position, (1.0, 1.0, 1.0))

    def test_set_positions_from_and_symbols(self):
        mol = _ethane_skeleton()
        mol.set_positions_from([(3, (0.0, 0.0, 1.5)), (1, (0.0, 0.0, -1.5))])
        self.assertEqual(mol.get_atom(3).position, (0.0, 0.0, 1.5))
        self.assertEqual(mol.get_atom(1).position, (0.0, 0.0, -1.5))
        with self.assertRaises(InvalidSerialNumber):
            mol.set_positions_from([(9, (0.0, 0.0, 0.0))])

        mol.set_symbols(["O", "H"])
        self.assertEqual(list(mol.symbols()), ["O", "H", "C"])


class MoleculeExtrasTest(unittest.TestCase):
    """Casos de prueba para fórmula, celda y propiedades."""

    def test_formula(self):
        mol = Molecule.from_atoms([Atom(s) for s in ["C", "H", "C", "H", "H", "H"]])
        self.assertEqual(mol.formula(), "C2H4")
        self.assertEqual(mol.reduced_symbols(), {"C": 2, "H": 4})
        self.assertEqual(Molecule().formula(), "")

    def test_lattice_and_properties(self):
        mol = Molecule("cell")
        self.assertFalse(mol.is_periodic())
        mol.lattice = Lattice((10.0, 0.0, 0.0), (0.0, 10.0, 0.0), (0.0, 0.0, 10.0))
        self.assertTrue(mol.is_periodic())
        self.assertAlmostEqual(mol.lattice.volume(), 1000.0)
        self.assertEqual(mol.lattice.lengths(), (10.0, 10.0, 10.0))

        mol.properties.store("energy", -76.4)
        self.assertEqual(mol.properties.load("energy"), -76.4)
        self.assertIn("energy", mol.properties)


if __name__ == "__main__":
    unittest.main()
