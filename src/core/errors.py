"""Excepciones del modelo molecular.

Los "no encontrado" recuperables se devuelven como `None`; estas
excepciones señalan violaciones de precondición que no deben ignorarse.
"""


class MoleculeError(Exception):
    """Base de los errores del modelo molecular."""


class InvalidSerialNumber(MoleculeError, LookupError):
    """Se lanza cuando una operación exige un número de serie existente."""

    def __init__(self, sn) -> None:
        super().__init__(f"invalid atom sn: {sn}")
        self.sn = sn


class InvalidNodeIndex(MoleculeError, LookupError):
    """Se lanza al desreferenciar un índice de nodo inexistente o liberado."""

    def __init__(self, index) -> None:
        super().__init__(f"invalid NodeIndex: {index}")
        self.index = index


class MissingEdge(MoleculeError, LookupError):
    """Se lanza al leer un enlace inexistente entre dos nodos."""

    def __init__(self, n1, n2) -> None:
        super().__init__(f"no edge between nodes {n1} and {n2}")
        self.nodes = (n1, n2)


class MappingConflict(MoleculeError):
    """Se lanza cuando una inserción sin sobrescritura choca con el mapeo."""
