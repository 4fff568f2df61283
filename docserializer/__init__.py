from .config import SerializerConfig
from .document import Document
from .errors import DocSerializerError
from .errors import InvalidParameter
from .interfaces import Modifier
from .interfaces import Record
from .interfaces import Serializable
from .serializers.base import FieldSpec
from .serializers.base import PickList
from .serializers.registry import SerializerRegistry

__all__ = [
    "SerializerConfig",
    "Document",
    "DocSerializerError",
    "InvalidParameter",
    "Modifier",
    "Record",
    "Serializable",
    "FieldSpec",
    "PickList",
    "SerializerRegistry",
]
