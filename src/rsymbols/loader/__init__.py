"""Loader module initialization."""

from .errors import LoadError, MalformedLineError, SourceReadError, LoaderStateError
from .line_source import read_all_lines
from .symbol_loader import SymbolLoader, parse_line, parse_lines

__all__ = [
    "LoadError",
    "MalformedLineError",
    "SourceReadError",
    "LoaderStateError",
    "read_all_lines",
    "SymbolLoader",
    "parse_line",
    "parse_lines"
]
