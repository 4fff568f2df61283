from typing import Any
from typing import Iterator
from typing import Mapping

from docserializer.interfaces import Record
from docserializer.serializers.registry import SerializerRegistry


class Document(Mapping[str, Any]):
    """
    A single record bound to the serializer registry of its model.
    """

    def __init__(
        self, data: Mapping[str, Any], serializer: SerializerRegistry
    ) -> None:
        self._data: Record = dict(data)
        self._serializer = serializer

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Document({self._data!r})"

    def to_dict(self) -> Record:
        return dict(self._data)

    def serialize(self, selector: Any = None) -> Record:
        return self._serializer.serialize_one(self.to_dict(), selector)
