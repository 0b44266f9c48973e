from __future__ import annotations
from threading import Lock
from typing import Optional, Union

from .core.cache import InternedType, TypeCache
from .core.codec import TypeStringCodec
from .core.symbols import SymbolTable
from .types.descriptors import TypeDescriptor

_default_cache: Optional[TypeCache] = None
_default_cache_lock = Lock()


def get_default_cache() -> TypeCache:
    """The process-wide cache. Created once and never torn down."""
    global _default_cache
    cache = _default_cache
    if cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = TypeCache()
            cache = _default_cache
    return cache


def create_cache(
    codec: Optional[TypeStringCodec] = None,
    symbol_table: Optional[SymbolTable] = None
) -> TypeCache:
    if codec is not None and symbol_table is not None:
        raise ValueError("Pass either codec or symbol_table, not both")
    if codec is None and symbol_table is not None:
        codec = TypeStringCodec(symbol_table)
    return TypeCache(codec)


def intern(descriptor: TypeDescriptor) -> InternedType:
    return get_default_cache().intern(descriptor)


def intern_from_text(text: Union[str, bytes]) -> InternedType:
    return get_default_cache().intern_from_text(text)


def resolve(handle: InternedType) -> TypeDescriptor:
    return get_default_cache().resolve(handle)
