"""
Type definitions and protocols for typecanon.

This module provides the element type enumeration, the structured
type descriptors and the protocols implemented by the codec and cache.
"""

from .descriptors import TypeDescriptor, TensorType
from .enums import ElementType
from .protocols import ITypeCodec, ITypeCache
from .aliases import CanonicalKey, ElementTypeName

__all__ = [
    # Descriptors
    "TypeDescriptor",
    "TensorType",

    # Enums
    "ElementType",

    # Protocols
    "ITypeCodec",
    "ITypeCache",

    # Type aliases
    "CanonicalKey",
    "ElementTypeName",
]
