"""API pública de cálculos químicos auxiliares."""

from .formula import format_formula, get_reduced_formula, reduced_symbols
from .options import FormulaOptions

__all__ = [
    "reduced_symbols",
    "format_formula",
    "get_reduced_formula",
    "FormulaOptions",
]
