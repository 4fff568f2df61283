from .base import ByName
from .base import FieldSpec
from .base import Inline
from .base import PickList
from .base import SerializerSpec
from .registry import SerializerRegistry

__all__ = [
    "ByName",
    "FieldSpec",
    "Inline",
    "PickList",
    "SerializerSpec",
    "SerializerRegistry",
]
