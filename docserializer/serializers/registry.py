import threading
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Sequence

from docserializer.config import SerializerConfig
from docserializer.errors import InvalidParameter
from docserializer.interfaces import Modifier
from docserializer.interfaces import Record
from docserializer.interfaces import Serializable
from docserializer.log_config import logger
from docserializer.serializers.base import ByName
from docserializer.serializers.base import FieldSpec
from docserializer.serializers.base import PickList
from docserializer.serializers.base import SerializerSpec
from docserializer.serializers.base import coerce_spec
from docserializer.serializers.base import to_selector
from docserializer.serializers.base import validate_name
from docserializer.utils import omit
from docserializer.utils import pick

DOCUMENTS_MESSAGE = "documents must be a list of document objects"


def _copy_original(serialized: Record, original: Record) -> Record:
    return dict(original)


# identity: shallow copy of the whole record
DEFAULT_SPEC = FieldSpec(modify=_copy_original)


def _apply(spec: FieldSpec, document: Mapping[Any, Any]) -> Record:
    serialized: Record = {}
    untouched = spec.include is None and spec.exclude is None
    if spec.include is not None:
        serialized = pick(document, spec.include)
    if spec.exclude is not None:
        if spec.include is None:
            serialized = dict(document)
        serialized = omit(serialized, spec.exclude)
    if callable(spec.modify):
        modify: Modifier = spec.modify
        if untouched:
            serialized = dict(document)
        serialized = modify(serialized, document)
    elif untouched:
        # an empty spec keeps every field
        serialized = dict(document)
    return serialized


class SerializerRegistry:
    """
    Named views of a document, keyed by serializer name.

    Always starts with the built-in identity serializer (``"_default"``
    unless configured otherwise), which is also the current default.
    Mutations are serialized by a lock; projections only read.
    """

    def __init__(self, config: Optional[SerializerConfig] = None) -> None:
        self._config = config or SerializerConfig()
        self._map: Dict[str, SerializerSpec] = {
            self._config.default_name: DEFAULT_SPEC
        }
        self._default = self._config.default_name
        self._lock = threading.Lock()

    @property
    def default(self) -> str:
        return self._default

    def names(self) -> List[str]:
        return list(self._map)

    def get(self, name: str) -> Optional[SerializerSpec]:
        return self._map.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._map

    def __len__(self) -> int:
        return len(self._map)

    def add(self, name: str, options: Any) -> None:
        validate_name(name)
        spec = coerce_spec(options)
        with self._lock:
            self._map[name] = spec
        logger.debug("Serializer '%s' added", name)

    def set_default(self, name: str) -> None:
        validate_name(name)
        with self._lock:
            self._set_default(name)

    def remove(self, name: str) -> None:
        validate_name(name)
        builtin = self._config.default_name
        if name == builtin and self._config.protect_default:
            raise InvalidParameter(
                f"Serializer '{name}' is built in and cannot be removed"
            )
        with self._lock:
            if name in self._map:
                del self._map[name]
                if name == builtin:
                    logger.warning("Built-in serializer '%s' removed", name)
                else:
                    logger.debug("Serializer '%s' removed", name)
            # fall back to the built-in serializer if it was the default
            if self._default == name:
                self._set_default(builtin)

    def serialize_one(
        self, document: Mapping[Any, Any], name_or_options: Any = None
    ) -> Record:
        """
        Project one record through a serializer.

        `name_or_options` is either a registered name or an inline spec
        (pick list or include/exclude/modify dict); None means the current
        default. The record itself is never modified.
        """
        if name_or_options is None:
            name_or_options = self._default

        selector = to_selector(name_or_options)
        if isinstance(selector, ByName):
            options = self._map.get(selector.name)
        else:
            options = selector.options
        spec = coerce_spec(options)

        if isinstance(spec, PickList):
            return pick(document, spec.names)
        return _apply(spec, document)

    def serialize_many(
        self, documents: Sequence[Any], name_or_options: Any = None
    ) -> List[Record]:
        """
        Serialize every entry of `documents` through its own ``serialize``.

        Entries without a serialize capability are skipped.
        """
        if not isinstance(documents, (list, tuple)):
            raise InvalidParameter(DOCUMENTS_MESSAGE)
        kept = [
            doc
            for doc in documents
            if isinstance(doc, Serializable) and callable(doc.serialize)
        ]
        if len(kept) != len(documents):
            logger.debug(
                "Skipped %d entries without serialize()",
                len(documents) - len(kept),
            )
        return [doc.serialize(name_or_options) for doc in kept]

    # hooks used by the document layer
    _serialize = serialize_one
    _serialize_many = serialize_many

    def _set_default(self, name: str) -> None:
        # caller holds the lock
        if name in self._map:
            self._default = name
            logger.debug("Default serializer set to '%s'", name)
        else:
            logger.debug("Serializer '%s' not registered, default kept", name)
