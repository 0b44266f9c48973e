"""
Core components for typecanon.

This module contains the lexical scanner, the element type symbol
table, the type-string codec and the interning cache.
"""

from .lexical import LexicalRange, NOT_FOUND
from .symbols import SymbolTable, get_symbol_table
from .codec import TypeStringCodec, get_default_codec
from .cache import TypeCache, InternedType

__all__ = [
    "LexicalRange",
    "NOT_FOUND",
    "SymbolTable",
    "get_symbol_table",
    "TypeStringCodec",
    "get_default_codec",
    "TypeCache",
    "InternedType",
]
