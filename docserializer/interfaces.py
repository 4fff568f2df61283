from typing import Any
from typing import Callable
from typing import Dict
from typing import Protocol
from typing import runtime_checkable

# A single document's fields, usually keyed by field name
Record = Dict[Any, Any]

# modify(serialized_so_far, original) -> final record
Modifier = Callable[[Record, Record], Record]


@runtime_checkable
class Serializable(Protocol):
    """
    Anything that can project itself through a serializer registry.
    """

    def serialize(self, selector: Any = None) -> Record:
        """
        Return the projection of this entity for `selector`
        (a serializer name or an inline spec).
        """
        ...
