"""
typecanon - Tensor Type Strings and Canonical Type Identities

Parses compact type notation such as ``"float"`` or ``"tensor(int64)"``
into structured descriptors, renders them back, and interns descriptors
so that structurally equal types share a single identity.

Key Features:
- Zero-copy lexical scanning over type strings
- Bidirectional element type symbol table
- Canonical text rendering with round-trip guarantees
- Thread-safe interning cache with identity-comparable handles
- torch and numpy dtype bridges
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Core components
from .core.lexical import LexicalRange
from .core.symbols import SymbolTable, get_symbol_table
from .core.codec import (
    TypeStringCodec,
    parse,
    render,
    is_valid_name,
    element_type_name,
    element_type_from_name
)
from .core.cache import TypeCache, InternedType
from .factory import (
    get_default_cache,
    create_cache,
    intern,
    intern_from_text,
    resolve
)

# dtype bridges
from .dtypes import (
    element_size,
    to_torch_dtype,
    from_torch_dtype,
    to_numpy_dtype,
    from_numpy_dtype
)

# Types and descriptors
from .types.descriptors import TypeDescriptor, TensorType
from .types.enums import ElementType
from .types.protocols import ITypeCodec, ITypeCache

# Exceptions
from .exceptions import (
    TypeCanonError,
    InvalidTypeName,
    UnknownElementType,
    UnsupportedDescriptor,
    UnknownHandle,
    SymbolTableError
)

# Public API
__all__ = [
    # Core components
    "LexicalRange",
    "SymbolTable",
    "get_symbol_table",
    "TypeStringCodec",
    "parse",
    "render",
    "is_valid_name",
    "element_type_name",
    "element_type_from_name",
    "TypeCache",
    "InternedType",
    "get_default_cache",
    "create_cache",
    "intern",
    "intern_from_text",
    "resolve",

    # dtype bridges
    "element_size",
    "to_torch_dtype",
    "from_torch_dtype",
    "to_numpy_dtype",
    "from_numpy_dtype",

    # Types
    "TypeDescriptor",
    "TensorType",
    "ElementType",
    "ITypeCodec",
    "ITypeCache",

    # Exceptions
    "TypeCanonError",
    "InvalidTypeName",
    "UnknownElementType",
    "UnsupportedDescriptor",
    "UnknownHandle",
    "SymbolTableError",
]

VERSION_INFO = tuple(map(int, __version__.split('.')))

def get_version() -> str:
    """Get the current version string."""
    return __version__

def get_version_info() -> tuple[int, ...]:
    """Get version as tuple of integers."""
    return VERSION_INFO
