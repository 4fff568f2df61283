import pytest

from docserializer.config import SerializerConfig
from docserializer.document import Document
from docserializer.serializers.registry import SerializerRegistry


@pytest.fixture
def registry():
    return SerializerRegistry()


@pytest.fixture
def strict_registry():
    return SerializerRegistry(SerializerConfig(protect_default=True))


@pytest.fixture
def record():
    return {
        "id": 7,
        "name": "ada",
        "email": "ada@example.com",
        "password": "secret",
        "tags": ["admin", "ops"],
    }


@pytest.fixture
def make_document(registry):
    def _make(data=None, serializer=None):
        return Document(data or {"a": 1, "b": 2}, serializer or registry)

    return _make
