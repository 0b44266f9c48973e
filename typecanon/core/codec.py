"""
Type-string codec for typecanon.

Converts between the compact type notation (``"float"``,
``"tensor(int64)"``) and :class:`TensorType` descriptors. The grammar is::

    type   := name | "tensor" "(" name ")"

with ASCII whitespace allowed around every token. A bare ``name`` is a
scalar: a tensor whose shape is explicitly initialized with zero
dimensions. The ``tensor(...)`` spelling leaves the shape unset.

Unknown names and unsupported descriptor variants raise
:class:`~typecanon.exceptions.TypeCanonError` subclasses. These signal a
broken caller contract, not malformed-but-expected input; validate
untrusted text with :func:`is_valid_name` before parsing it.
"""

from __future__ import annotations
from typing import Optional, Union

from .lexical import LexicalRange
from .symbols import SymbolTable, get_symbol_table
from ..types.aliases import ElementTypeName
from ..types.descriptors import TensorType, TypeDescriptor
from ..types.enums import ElementType
from ..exceptions import InvalidTypeName, UnsupportedDescriptor

TENSOR_PREFIX = "tensor"


class TypeStringCodec:
    """Parser and renderer bound to a :class:`SymbolTable`."""

    __slots__ = ('_symbols',)

    def __init__(self, symbol_table: Optional[SymbolTable] = None):
        self._symbols = symbol_table

    @property
    def symbol_table(self) -> SymbolTable:
        if self._symbols is None:
            return get_symbol_table()
        return self._symbols

    def is_valid_name(self, name: str) -> bool:
        return self.symbol_table.is_valid_name(name)

    def element_type_name(self, code: ElementType) -> ElementTypeName:
        return self.symbol_table.code_to_name(code)

    def element_type_from_name(self, name: str) -> ElementType:
        return self.symbol_table.name_to_code(name)

    def parse(self, text: Union[str, bytes]) -> TensorType:
        scanner = LexicalRange(text)

        if scanner.strip_leading(TENSOR_PREFIX):
            scanner.strip_parenthesized_whitespace()
            return TensorType(self._lookup(scanner, text), shape=None)

        return TensorType(self._lookup(scanner, text), shape=())

    def _lookup(self, scanner: LexicalRange, text: Union[str, bytes]) -> ElementType:
        name = scanner.text
        if not isinstance(name, str):
            try:
                name = name.decode('ascii')
            except UnicodeDecodeError:
                raise InvalidTypeName(f"Type string is not ASCII: {text!r}", name=None) from None

        symbols = self.symbol_table
        if not symbols.is_valid_name(name):
            raise InvalidTypeName(f"Unknown type name {name!r} in {text!r}", name=name)
        return symbols.name_to_code(name)

    def render(self, descriptor: TypeDescriptor, left: str = "", right: str = "") -> str:
        """Canonical text of ``descriptor``, wrapped in ``left`` / ``right``."""
        if not isinstance(descriptor, TensorType):
            raise UnsupportedDescriptor(
                f"Cannot render {type(descriptor).__name__}; only tensor types are supported",
                descriptor=descriptor
            )

        name = self.symbol_table.code_to_name(descriptor.elem_type)
        if descriptor.rank_is_zero:
            return f"{left}{name}{right}"
        return f"{left}{TENSOR_PREFIX}({name}){right}"


_default_codec = TypeStringCodec()


def get_default_codec() -> TypeStringCodec:
    return _default_codec


def parse(text: Union[str, bytes]) -> TensorType:
    return _default_codec.parse(text)


def render(descriptor: TypeDescriptor, left: str = "", right: str = "") -> str:
    return _default_codec.render(descriptor, left, right)


def is_valid_name(name: str) -> bool:
    return _default_codec.is_valid_name(name)


def element_type_name(code: ElementType) -> ElementTypeName:
    return _default_codec.element_type_name(code)


def element_type_from_name(name: str) -> ElementType:
    return _default_codec.element_type_from_name(name)
