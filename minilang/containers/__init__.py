"""
MiniLang Containers Package

Scope-chained symbol table used by block statements to hold their local
bindings.
"""

from .symbol_table import SymbolTable
from .errors import ContainerError, DuplicateKeyError, KeyNotFoundError, NullKeyError

__all__ = [
    "SymbolTable",
    "ContainerError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "NullKeyError",
]
