"""Celda cristalina para estructuras con condiciones periódicas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

Vector3 = Tuple[float, float, float]


@dataclass
class Lattice:
    """Celda definida por tres vectores de red (a, b, c) en Å."""
    a: Vector3
    b: Vector3
    c: Vector3

    def __post_init__(self) -> None:
        self.a = _as_vector(self.a)
        self.b = _as_vector(self.b)
        self.c = _as_vector(self.c)

    @classmethod
    def from_vectors(cls, vectors: Sequence[Sequence[float]]) -> "Lattice":
        a, b, c = vectors
        return cls(a, b, c)

    def vectors(self) -> Tuple[Vector3, Vector3, Vector3]:
        return self.a, self.b, self.c

    def lengths(self) -> Tuple[float, float, float]:
        """Longitudes de los tres vectores de red."""
        return tuple(math.sqrt(sum(x * x for x in v)) for v in self.vectors())  # type: ignore[return-value]

    def volume(self) -> float:
        """Volumen de la celda (valor absoluto del triple producto)."""
        (ax, ay, az), (bx, by, bz), (cx, cy, cz) = self.vectors()
        det = (
            ax * (by * cz - bz * cy)
            - ay * (bx * cz - bz * cx)
            + az * (bx * cy - by * cx)
        )
        return abs(det)


def _as_vector(values: Sequence[float]) -> Vector3:
    vector = tuple(float(v) for v in values)
    if len(vector) != 3:
        raise ValueError("lattice vectors must have 3 components")
    return vector  # type: ignore[return-value]
