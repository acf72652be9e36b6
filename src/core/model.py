"""Tipos de valor del modelo molecular: átomos y enlaces.

Los átomos y enlaces son datos pasivos; no conocen su número de serie ni
el grafo que los contiene. `core.molecule.Molecule` es quien los almacena
y los direcciona por número de serie.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence, Tuple, Union

from core.elements import atomic_number, element_symbol

Point3 = Tuple[float, float, float]


def _as_point3(position: Sequence[float]) -> Point3:
    values = tuple(float(v) for v in position)
    if len(values) != 3:
        raise ValueError(f"expected 3 coordinates, got {len(values)}")
    return values  # type: ignore[return-value]


class BondKind(str, Enum):
    """Tipos de enlace químico soportados."""
    DUMMY = "dummy"
    PARTIAL = "partial"
    SINGLE = "single"
    AROMATIC = "aromatic"
    DOUBLE = "double"
    TRIPLE = "triple"
    QUADRUPLE = "quadruple"


# Orden de enlace numérico asociado a cada tipo.
BOND_ORDERS = {
    BondKind.DUMMY: 0.0,
    BondKind.PARTIAL: 0.5,
    BondKind.SINGLE: 1.0,
    BondKind.AROMATIC: 1.5,
    BondKind.DOUBLE: 2.0,
    BondKind.TRIPLE: 3.0,
    BondKind.QUADRUPLE: 4.0,
}


@dataclass
class Atom:
    """Representa un átomo con posición 3D y coordenadas congelables."""
    symbol: str = "C"
    position: Point3 = (0.0, 0.0, 0.0)
    charge: int = 0
    label: str = ""
    # Marcas por eje (x, y, z); un eje congelado no cambia con `update_position`.
    freezing: List[bool] = field(default_factory=lambda: [False, False, False])

    def __post_init__(self) -> None:
        self.position = _as_point3(self.position)
        if len(self.freezing) != 3:
            raise ValueError("freezing flags must have 3 components")
        self.freezing = [bool(flag) for flag in self.freezing]

    @classmethod
    def from_number(cls, number: int, position: Sequence[float] = (0.0, 0.0, 0.0)) -> "Atom":
        """Crea un átomo a partir de su número atómico."""
        return cls(symbol=element_symbol(number), position=_as_point3(position))

    @property
    def number(self) -> int:
        """Número atómico; 0 para símbolos ficticios o desconocidos."""
        return atomic_number(self.symbol)

    def set_symbol(self, value: Union[str, int]) -> None:
        """Cambia el elemento del átomo.

        Args:
            value: Símbolo químico o número atómico.
        """
        if isinstance(value, int):
            self.symbol = element_symbol(value)
        else:
            self.symbol = str(value)

    def set_position(self, position: Sequence[float]) -> None:
        """Sobrescribe las tres coordenadas sin consultar `freezing`."""
        self.position = _as_point3(position)

    def update_position(self, position: Sequence[float]) -> None:
        """Actualiza la posición respetando los ejes congelados.

        Args:
            position: Nueva posición (x, y, z).

        Side Effects:
            Solo se modifican los componentes cuyo eje no está congelado.
        """
        new = _as_point3(position)
        self.position = tuple(
            old if frozen else value
            for old, value, frozen in zip(self.position, new, self.freezing)
        )

    def set_freezing(self, frozen: bool) -> None:
        """Congela o libera los tres ejes a la vez."""
        self.freezing = [bool(frozen)] * 3

    def is_fixed(self) -> bool:
        return all(self.freezing)


@dataclass
class Bond:
    """Representa un enlace químico; los extremos los guarda el grafo."""
    kind: BondKind = BondKind.SINGLE
    label: str = ""

    def __post_init__(self) -> None:
        self.kind = BondKind(self.kind)

    @classmethod
    def single(cls) -> "Bond":
        return cls(BondKind.SINGLE)

    @classmethod
    def double(cls) -> "Bond":
        return cls(BondKind.DOUBLE)

    @classmethod
    def triple(cls) -> "Bond":
        return cls(BondKind.TRIPLE)

    @classmethod
    def quadruple(cls) -> "Bond":
        return cls(BondKind.QUADRUPLE)

    @classmethod
    def aromatic(cls) -> "Bond":
        return cls(BondKind.AROMATIC)

    @classmethod
    def partial(cls) -> "Bond":
        return cls(BondKind.PARTIAL)

    @classmethod
    def dummy(cls) -> "Bond":
        return cls(BondKind.DUMMY)

    @property
    def order(self) -> float:
        """Orden de enlace numérico (p. ej., 1.5 para aromático)."""
        return BOND_ORDERS[self.kind]
