"""
Interning cache for type descriptors.

The cache maps the canonical string of a descriptor to a single
:class:`InternedType` handle. Handles compare by identity, and two
handles are the same object iff their descriptors render to the same
canonical string. Entries are insert-only, so a handle stays valid for
as long as its cache is alive.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from threading import Lock
from typing import Any, Dict, List, Optional, Tuple, Union

from .codec import TypeStringCodec, get_default_codec
from ..types.aliases import CanonicalKey
from ..types.descriptors import TypeDescriptor
from ..exceptions import UnknownHandle

logger = logging.getLogger(__name__)


class InternedType:
    """Opaque identity key for a canonicalized type.

    Equality and hashing are by identity; use ``is`` or ``==`` freely.
    """

    __slots__ = ('_key', '_owner', '__weakref__')

    def __init__(self, key: CanonicalKey, owner: TypeCache):
        self._key = key
        self._owner = owner

    @property
    def key(self) -> CanonicalKey:
        return self._key

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"InternedType({self._key!r})"


class TypeCache:
    """Insert-only, lock-protected map from canonical string to descriptor."""

    __slots__ = ('_codec', '_entries', '_lock', '_access_stats')

    def __init__(self, codec: Optional[TypeStringCodec] = None):
        self._codec = codec if codec is not None else get_default_codec()
        self._entries: Dict[CanonicalKey, Tuple[InternedType, TypeDescriptor]] = {}
        self._lock = Lock()
        self._access_stats = defaultdict(int)

    @property
    def codec(self) -> TypeStringCodec:
        return self._codec

    def intern(self, descriptor: TypeDescriptor) -> InternedType:
        key = CanonicalKey(self._codec.render(descriptor))

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._access_stats['hits'] += 1
                return entry[0]

            handle = InternedType(key, self)
            self._entries[key] = (handle, descriptor)
            self._access_stats['misses'] += 1

        logger.debug("Interned new type %r", key)
        return handle

    def intern_from_text(self, text: Union[str, bytes]) -> InternedType:
        return self.intern(self._codec.parse(text))

    def resolve(self, handle: InternedType) -> TypeDescriptor:
        """Return the descriptor stored for ``handle``.

        Raises:
            UnknownHandle: ``handle`` was not produced by this cache.
        """
        if not isinstance(handle, InternedType) or handle._owner is not self:
            raise UnknownHandle(f"Handle {handle!r} does not belong to this cache", handle=handle)

        with self._lock:
            entry = self._entries.get(handle.key)

        if entry is None or entry[0] is not handle:
            raise UnknownHandle(f"Handle {handle!r} is not registered", handle=handle)
        return entry[1]

    def lookup(self, key: str) -> Optional[InternedType]:
        """Return the handle for a canonical string without inserting."""
        with self._lock:
            entry = self._entries.get(key)
        return entry[0] if entry is not None else None

    def keys(self) -> List[CanonicalKey]:
        with self._lock:
            return list(self._entries)

    def get_access_statistics(self) -> Dict[str, Any]:
        with self._lock:
            hits = self._access_stats['hits']
            misses = self._access_stats['misses']
            total_requests = hits + misses
            return {
                'entries': len(self._entries),
                'hits': hits,
                'misses': misses,
                'hit_ratio': hits / total_requests if total_requests > 0 else 0.0,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __repr__(self) -> str:
        return f"TypeCache(entries={len(self)})"
