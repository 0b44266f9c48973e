from __future__ import annotations
from typing import Optional, Protocol, Union, runtime_checkable

from .aliases import CanonicalKey
from .descriptors import TensorType, TypeDescriptor
from .enums import ElementType


@runtime_checkable
class ITypeCodec(Protocol):
    def parse(self, text: Union[str, bytes]) -> TensorType:
        ...

    def render(self, descriptor: TypeDescriptor, left: str = "", right: str = "") -> str:
        ...

    def is_valid_name(self, name: str) -> bool:
        ...

    def element_type_name(self, code: ElementType) -> str:
        ...

    def element_type_from_name(self, name: str) -> ElementType:
        ...


@runtime_checkable
class ITypeCache(Protocol):
    def intern(self, descriptor: TypeDescriptor) -> object:
        ...

    def intern_from_text(self, text: Union[str, bytes]) -> object:
        ...

    def resolve(self, handle: object) -> TypeDescriptor:
        ...

    def lookup(self, key: CanonicalKey) -> Optional[object]:
        ...
