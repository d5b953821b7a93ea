"""IR module initialization."""

from .entry import SymbolEntry
from .table import SymbolTable

__all__ = [
    "SymbolEntry",
    "SymbolTable"
]
