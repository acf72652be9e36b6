"""Cálculo y formateo de fórmulas moleculares reducidas.

Este módulo cuenta los símbolos de una secuencia de átomos y formatea la
fórmula con el carbono al principio y el hidrógeno al final.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .options import FormulaOptions


def reduced_symbols(symbols: Iterable) -> Dict[str, int]:
    """Cuenta las apariciones de cada símbolo: CCCC -> {"C": 4}.

    Args:
        symbols: Secuencia de símbolos; cada elemento se convierte con `str`.

    Returns:
        Diccionario símbolo -> conteo, con claves en orden de primera aparición.
    """
    counts: Dict[str, int] = {}
    for item in symbols:
        symbol = str(item)
        counts[symbol] = counts.get(symbol, 0) + 1
    return counts


def format_formula(counts: Dict[str, int], options: Optional[FormulaOptions] = None) -> str:
    """Formatea un conteo de símbolos como fórmula (C primero, H al final).

    Args:
        counts: Diccionario con símbolos de elementos y cantidades.
        options: Opciones de formateo; por defecto `FormulaOptions()`.

    Returns:
        Cadena con la fórmula formateada (p. ej., "C2O2H4"), o "" si no hay
        símbolos.

    Side Effects:
        No tiene efectos laterales.
    """
    options = options or FormulaOptions()
    others = [symbol for symbol in counts if symbol not in {"C", "H"}]
    if options.other_order == "alphabetical":
        others.sort()

    order: List[str] = []
    if "C" in counts:
        order.append("C")
    order.extend(others)
    if "H" in counts:
        order.append("H")

    parts = []
    for symbol in order:
        count = counts[symbol]
        if count <= 0:
            continue
        if count == 1 and options.omit_unit_count:
            parts.append(symbol)
        else:
            parts.append(f"{symbol}{count}")
    return "".join(parts)


def get_reduced_formula(symbols: Iterable, options: Optional[FormulaOptions] = None) -> str:
    """Devuelve la fórmula reducida de una secuencia de símbolos.

    Una secuencia vacía produce la cadena vacía.
    """
    return format_formula(reduced_symbols(symbols), options)
