from __future__ import annotations
from typing import Any, Optional


class TypeCanonError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class SymbolTableError(TypeCanonError):
    pass


class InvalidTypeName(TypeCanonError, ValueError):
    def __init__(self, message: str, name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.name = name


class UnknownElementType(TypeCanonError, ValueError):
    def __init__(self, message: str, code: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code


class UnsupportedDescriptor(TypeCanonError, TypeError):
    def __init__(self, message: str, descriptor: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.descriptor = descriptor


class UnknownHandle(TypeCanonError, KeyError):
    def __init__(self, message: str, handle: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.handle = handle

    def __str__(self) -> str:
        return self.message
