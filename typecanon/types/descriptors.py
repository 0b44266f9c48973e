from __future__ import annotations
from dataclasses import dataclass, replace as dataclass_replace
from typing import Optional, Tuple

from .enums import ElementType


@dataclass(frozen=True)
class TypeDescriptor:
    """Base of all structured type descriptors.

    Only :class:`TensorType` is understood by the codec; other variants
    (sequence, map, sparse tensor) subclass this and are rejected there.
    """


@dataclass(frozen=True)
class TensorType(TypeDescriptor):
    elem_type: ElementType
    shape: Optional[Tuple[int, ...]] = None

    def __post_init__(self):
        object.__setattr__(self, 'elem_type', ElementType.from_code(self.elem_type))

        if self.shape is not None:
            shape = tuple(self.shape)
            if any(not isinstance(dim, int) or dim < 0 for dim in shape):
                raise ValueError(f"Invalid tensor shape: {self.shape}")
            object.__setattr__(self, 'shape', shape)

    @classmethod
    def scalar(cls, elem_type: ElementType) -> TensorType:
        return cls(elem_type, shape=())

    @property
    def has_shape(self) -> bool:
        return self.shape is not None

    @property
    def rank(self) -> Optional[int]:
        return None if self.shape is None else len(self.shape)

    @property
    def rank_is_zero(self) -> bool:
        # An explicit empty dimension list, not an unset shape.
        return self.shape == ()

    def with_shape(self, shape: Optional[Tuple[int, ...]]) -> TensorType:
        return dataclass_replace(self, shape=shape)
