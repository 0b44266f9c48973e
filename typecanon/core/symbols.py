"""
Symbol table between element type names and codes.

The table is immutable after construction. :func:`get_symbol_table`
hands out a single process-wide instance that is built on first use,
since codec and cache instances may be created at import time of
dependent modules before any explicit initialization has run.
"""

from __future__ import annotations
import logging
from threading import Lock
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from ..types.aliases import ElementTypeName
from ..types.enums import ElementType
from ..exceptions import InvalidTypeName, SymbolTableError, UnknownElementType

logger = logging.getLogger(__name__)

# Must stay in lock-step with ElementType.
DEFAULT_TYPE_NAMES: Tuple[Tuple[str, ElementType], ...] = (
    ("float", ElementType.FLOAT),
    ("float16", ElementType.FLOAT16),
    ("double", ElementType.DOUBLE),
    ("int8", ElementType.INT8),
    ("int16", ElementType.INT16),
    ("int32", ElementType.INT32),
    ("int64", ElementType.INT64),
    ("uint8", ElementType.UINT8),
    ("uint16", ElementType.UINT16),
    ("uint32", ElementType.UINT32),
    ("uint64", ElementType.UINT64),
    ("complex64", ElementType.COMPLEX64),
    ("complex128", ElementType.COMPLEX128),
    ("string", ElementType.STRING),
    ("bool", ElementType.BOOL),
)


class SymbolTable:
    """Case-sensitive bijection between type names and :class:`ElementType` codes."""

    __slots__ = ('_name_to_code', '_code_to_name', '_names')

    def __init__(self, entries: Iterable[Tuple[str, ElementType]] = DEFAULT_TYPE_NAMES):
        name_to_code: Dict[str, ElementType] = {}
        code_to_name: Dict[ElementType, str] = {}

        for name, code in entries:
            try:
                code = ElementType.from_code(code)
            except UnknownElementType as exc:
                raise SymbolTableError(
                    f"Type name {name!r} has no valid element type: {exc.message}",
                    name=name, code=code
                ) from exc
            if name in name_to_code:
                raise SymbolTableError(f"Duplicate type name: {name!r}", name=name)
            if code in code_to_name:
                raise SymbolTableError(
                    f"Element type {code.name} registered as both "
                    f"{code_to_name[code]!r} and {name!r}",
                    code=code
                )
            name_to_code[name] = code
            code_to_name[code] = name

        self._name_to_code = name_to_code
        self._code_to_name = code_to_name
        self._names = frozenset(name_to_code)

        logger.debug("Built symbol table with %d element types", len(name_to_code))

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    @property
    def codes(self) -> FrozenSet[ElementType]:
        return frozenset(self._code_to_name)

    def is_valid_name(self, name: str) -> bool:
        return name in self._names

    def name_to_code(self, name: str) -> ElementType:
        """Look up the code for ``name``.

        Callers holding untrusted text must check :meth:`is_valid_name`
        first; an unknown name is a contract violation.
        """
        try:
            return self._name_to_code[name]
        except KeyError:
            raise InvalidTypeName(f"Unknown type name: {name!r}", name=name) from None

    def code_to_name(self, code: ElementType) -> ElementTypeName:
        code = ElementType.from_code(code)
        try:
            return ElementTypeName(self._code_to_name[code])
        except KeyError:
            raise UnknownElementType(f"Unknown element type code: {code!r}", code=code) from None

    def __len__(self) -> int:
        return len(self._name_to_code)

    def __contains__(self, name: object) -> bool:
        return name in self._names


_default_table: Optional[SymbolTable] = None
_default_table_lock = Lock()


def get_symbol_table() -> SymbolTable:
    """Return the process-wide symbol table, building it exactly once."""
    global _default_table
    table = _default_table
    if table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = SymbolTable()
            table = _default_table
    return table
