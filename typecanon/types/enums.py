"""
Enumeration types for typecanon.

Element type codes match the ``TensorProto.DataType`` values of the
ONNX protobuf schema, so descriptors can be populated into a real
``TypeProto`` without translation.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any

from ..exceptions import UnknownElementType


class ElementType(IntEnum):
    """Scalar element kinds of a tensor."""
    FLOAT = 1
    UINT8 = 2
    INT8 = 3
    UINT16 = 4
    INT16 = 5
    INT32 = 6
    INT64 = 7
    STRING = 8
    BOOL = 9
    FLOAT16 = 10
    DOUBLE = 11
    UINT32 = 12
    UINT64 = 13
    COMPLEX64 = 14
    COMPLEX128 = 15

    @classmethod
    def from_code(cls, code: Any) -> ElementType:
        """Strict lookup: ``bool``, floats and other non-``int`` values are rejected."""
        if isinstance(code, cls):
            return code
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownElementType(f"Element type code must be an int, got {code!r}", code=code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownElementType(f"Unknown element type code: {code!r}", code=code) from None
