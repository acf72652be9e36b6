"""Opciones de configuración para el formateo de fórmulas."""

from dataclasses import dataclass

# Órdenes admitidos para los elementos distintos de C y H.
OTHER_ORDERS = ("alphabetical", "encounter")


@dataclass
class FormulaOptions:
    """Opciones de control del formateo de fórmulas reducidas."""

    # Orden de los elementos que no son C ni H: "alphabetical" o
    # "encounter" (orden de primera aparición en la secuencia de símbolos).
    other_order: str = "alphabetical"
    # Omitir el conteo cuando vale 1 ("CH4" en lugar de "C1H4").
    omit_unit_count: bool = True

    def __post_init__(self) -> None:
        if self.other_order not in OTHER_ORDERS:
            raise ValueError(f"unknown other_order: {self.other_order!r}")
