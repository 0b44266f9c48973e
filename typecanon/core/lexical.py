"""
Zero-copy lexical scanning for typecanon.

A :class:`LexicalRange` is a mutable window over caller-owned ``str`` or
``bytes`` storage. Strip operations only move integer offsets; the
underlying buffer is never sliced until a caller asks for the text.
Leading strips are additionally recorded in a capture span so the
consumed prefix can be recovered with :meth:`LexicalRange.captured`.
"""

from __future__ import annotations
from typing import Optional, Union

Source = Union[str, bytes, bytearray]
Pattern = Union[str, bytes, bytearray, "LexicalRange"]

NOT_FOUND = -1

_ASCII_WHITESPACE = ' \t\n\r\x0b\x0c'
_WHITESPACE_CHARS = frozenset(_ASCII_WHITESPACE)
_WHITESPACE_BYTES = frozenset(_ASCII_WHITESPACE.encode('ascii'))


class LexicalRange:
    """A non-owning view ``source[start:end]`` with a capture span."""

    __slots__ = ('_source', '_start', '_end', '_capture_start', '_capture_end', '_whitespace')

    def __init__(
        self,
        source: Source = "",
        start: int = 0,
        end: Optional[int] = None,
        strip: bool = True
    ):
        self._bind(source, start, end)
        if strip:
            self.strip_both_whitespace()

    def _bind(self, source: Source, start: int, end: Optional[int]) -> None:
        if isinstance(source, str):
            self._whitespace = _WHITESPACE_CHARS
        elif isinstance(source, (bytes, bytearray)):
            self._whitespace = _WHITESPACE_BYTES
        else:
            raise TypeError(f"Expected str or bytes, got {type(source).__name__}")

        if end is None:
            end = len(source)
        if not 0 <= start <= end <= len(source):
            raise ValueError(f"Invalid range [{start}, {end}) for source of length {len(source)}")

        self._source = source
        self._start = start
        self._end = end
        self._capture_start = start
        self._capture_end = start

    @property
    def source(self) -> Source:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def size(self) -> int:
        return self._end - self._start

    @property
    def empty(self) -> bool:
        return self._end == self._start

    @property
    def text(self) -> Source:
        """Materialize the current view. This is the only copying accessor."""
        return self._source[self._start:self._end]

    def reset(self, source: Source = "", start: int = 0, end: Optional[int] = None) -> None:
        """Rebind the view to new storage without stripping whitespace."""
        self._bind(source, start, end)

    def _coerce(self, pattern: Pattern) -> Optional[Source]:
        """Convert ``pattern`` to the source's type, or None if it cannot occur in it."""
        if isinstance(pattern, LexicalRange):
            pattern = pattern.text
        try:
            if isinstance(self._source, str):
                if isinstance(pattern, (bytes, bytearray)):
                    return pattern.decode('ascii')
                return pattern
            if isinstance(pattern, str):
                return pattern.encode('ascii')
        except UnicodeError:
            return None
        return pattern

    def starts_with(self, other: Pattern) -> bool:
        pattern = self._coerce(other)
        if pattern is None or len(pattern) > self.size:
            return False
        return self._source.startswith(pattern, self._start, self._end)

    def ends_with(self, other: Pattern) -> bool:
        pattern = self._coerce(other)
        if pattern is None or len(pattern) > self.size:
            return False
        return self._source.endswith(pattern, self._start, self._end)

    def strip_leading_whitespace(self) -> bool:
        count = 0
        while count < self.size and self._source[self._start + count] in self._whitespace:
            count += 1
        if count > 0:
            return self.strip_leading(count)
        return False

    def strip_trailing_whitespace(self) -> bool:
        count = 0
        while count < self.size and self._source[self._end - 1 - count] in self._whitespace:
            count += 1
        if count > 0:
            return self.strip_trailing(count)
        return False

    def strip_both_whitespace(self) -> bool:
        leading = self.strip_leading_whitespace()
        trailing = self.strip_trailing_whitespace()
        return leading or trailing

    def strip_leading(self, count_or_pattern: Union[int, Pattern]) -> bool:
        """Advance past ``n`` units, or past ``pattern`` if the view starts with it."""
        if isinstance(count_or_pattern, int):
            count = count_or_pattern
            if 0 <= count <= self.size:
                self._start += count
                self._capture_end += count
                return True
            return False

        if self.starts_with(count_or_pattern):
            return self.strip_leading(len(count_or_pattern))
        return False

    def strip_trailing(self, count_or_pattern: Union[int, Pattern]) -> bool:
        """Retract the end of the view. Capture markers are not touched."""
        if isinstance(count_or_pattern, int):
            count = count_or_pattern
            if 0 <= count <= self.size:
                self._end -= count
                return True
            return False

        if self.ends_with(count_or_pattern):
            return self.strip_trailing(len(count_or_pattern))
        return False

    def strip_parenthesized_whitespace(self) -> None:
        """Unwrap ``" ( body ) "`` to ``"body"``. Handles a single pair only."""
        self.strip_leading_whitespace()
        self.strip_leading("(")
        self.strip_both_whitespace()
        self.strip_trailing(")")
        self.strip_trailing_whitespace()

    def find(self, ch: Union[str, bytes, int]) -> int:
        if isinstance(ch, int):
            if isinstance(self._source, str):
                needle = chr(ch) if 0 <= ch <= 0x10FFFF else None
            else:
                needle = ch if 0 <= ch <= 0xFF else None
        else:
            needle = self._coerce(ch)
        if needle is None:
            return NOT_FOUND
        idx = self._source.find(needle, self._start, self._end)
        return NOT_FOUND if idx < 0 else idx - self._start

    def captured(self) -> LexicalRange:
        """Range over everything consumed by leading strips since the last restart."""
        return LexicalRange(self._source, self._capture_start, self._capture_end, strip=False)

    def restart_capture(self) -> None:
        self._capture_start = self._start
        self._capture_end = self._start

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, idx: int):
        if not 0 <= idx < self.size:
            raise IndexError(f"LexicalRange index out of range: {idx}")
        return self._source[self._start + idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (str, bytes, bytearray, LexicalRange)):
            return NotImplemented
        return len(other) == self.size and self.starts_with(other)

    __hash__ = None

    def __str__(self) -> str:
        text = self.text
        if isinstance(text, str):
            return text
        return text.decode('ascii', errors='replace')

    def __repr__(self) -> str:
        return f"LexicalRange({self.text!r})"
