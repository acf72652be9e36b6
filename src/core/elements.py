"""Tabla periódica mínima: conversión entre símbolo y número atómico."""

from __future__ import annotations

from typing import Dict, Tuple

ELEMENT_SYMBOLS: Tuple[str, ...] = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd",
    "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba",
    "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er",
    "Tm", "Yb", "Lu",
    "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra",
    "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr",
    "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn",
    "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

_NUMBER_BY_SYMBOL: Dict[str, int] = {
    symbol: index + 1 for index, symbol in enumerate(ELEMENT_SYMBOLS)
}


def atomic_number(symbol: str) -> int:
    """Devuelve el número atómico de un símbolo.

    Args:
        symbol: Símbolo químico (se normaliza la capitalización, "cl" -> "Cl").

    Returns:
        Número atómico, o 0 para símbolos desconocidos o átomos ficticios.
    """
    key = symbol.strip().capitalize()
    return _NUMBER_BY_SYMBOL.get(key, 0)


def element_symbol(number: int) -> str:
    """Devuelve el símbolo químico asociado a un número atómico.

    Raises:
        ValueError: Si el número está fuera de la tabla periódica.
    """
    if not 1 <= number <= len(ELEMENT_SYMBOLS):
        raise ValueError(f"invalid atomic number: {number}")
    return ELEMENT_SYMBOLS[number - 1]
