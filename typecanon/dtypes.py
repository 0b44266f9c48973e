"""
Bridges between :class:`ElementType` and framework dtypes.

torch has no string dtype; numpy strings are stored as ``object``.
"""

from __future__ import annotations
from typing import Any, Dict

import numpy as np
import torch

from .types.enums import ElementType
from .exceptions import UnknownElementType

_ELEMENT_SIZES: Dict[ElementType, int] = {
    ElementType.BOOL: 1,
    ElementType.UINT8: 1,
    ElementType.INT8: 1,
    ElementType.UINT16: 2,
    ElementType.INT16: 2,
    ElementType.FLOAT16: 2,
    ElementType.UINT32: 4,
    ElementType.INT32: 4,
    ElementType.FLOAT: 4,
    ElementType.UINT64: 8,
    ElementType.INT64: 8,
    ElementType.DOUBLE: 8,
    ElementType.COMPLEX64: 8,
    ElementType.COMPLEX128: 16,
}

_TORCH_DTYPES: Dict[ElementType, torch.dtype] = {
    ElementType.BOOL: torch.bool,
    ElementType.UINT8: torch.uint8,
    ElementType.INT8: torch.int8,
    ElementType.UINT16: torch.uint16,
    ElementType.INT16: torch.int16,
    ElementType.FLOAT16: torch.float16,
    ElementType.UINT32: torch.uint32,
    ElementType.INT32: torch.int32,
    ElementType.FLOAT: torch.float32,
    ElementType.UINT64: torch.uint64,
    ElementType.INT64: torch.int64,
    ElementType.DOUBLE: torch.float64,
    ElementType.COMPLEX64: torch.complex64,
    ElementType.COMPLEX128: torch.complex128,
}
_FROM_TORCH = {dtype: elem for elem, dtype in _TORCH_DTYPES.items()}

_NUMPY_DTYPES: Dict[ElementType, np.dtype] = {
    ElementType.BOOL: np.dtype(np.bool_),
    ElementType.UINT8: np.dtype(np.uint8),
    ElementType.INT8: np.dtype(np.int8),
    ElementType.UINT16: np.dtype(np.uint16),
    ElementType.INT16: np.dtype(np.int16),
    ElementType.FLOAT16: np.dtype(np.float16),
    ElementType.UINT32: np.dtype(np.uint32),
    ElementType.INT32: np.dtype(np.int32),
    ElementType.FLOAT: np.dtype(np.float32),
    ElementType.UINT64: np.dtype(np.uint64),
    ElementType.INT64: np.dtype(np.int64),
    ElementType.DOUBLE: np.dtype(np.float64),
    ElementType.COMPLEX64: np.dtype(np.complex64),
    ElementType.COMPLEX128: np.dtype(np.complex128),
    ElementType.STRING: np.dtype(object),
}
_FROM_NUMPY = {dtype: elem for elem, dtype in _NUMPY_DTYPES.items()}


def element_size(elem_type: ElementType) -> int:
    """Bytes per element. Strings have no fixed width."""
    try:
        return _ELEMENT_SIZES[elem_type]
    except KeyError:
        raise UnknownElementType(f"No fixed element size for {elem_type!r}", code=elem_type) from None


def to_torch_dtype(elem_type: ElementType) -> torch.dtype:
    try:
        return _TORCH_DTYPES[elem_type]
    except KeyError:
        raise UnknownElementType(f"No torch dtype for {elem_type!r}", code=elem_type) from None


def from_torch_dtype(dtype: torch.dtype) -> ElementType:
    try:
        return _FROM_TORCH[dtype]
    except KeyError:
        raise UnknownElementType(f"No element type for torch dtype {dtype}", code=dtype) from None


def to_numpy_dtype(elem_type: ElementType) -> np.dtype:
    try:
        return _NUMPY_DTYPES[elem_type]
    except KeyError:
        raise UnknownElementType(f"No numpy dtype for {elem_type!r}", code=elem_type) from None


def from_numpy_dtype(dtype: Any) -> ElementType:
    dtype = np.dtype(dtype)
    if dtype.kind in ('U', 'S', 'O'):
        return ElementType.STRING
    try:
        return _FROM_NUMPY[dtype]
    except KeyError:
        raise UnknownElementType(f"No element type for numpy dtype {dtype}", code=dtype) from None
