from typing import Any
from typing import Hashable
from typing import Mapping
from typing import NamedTuple
from typing import Optional
from typing import Tuple
from typing import Union

from pydantic import BaseModel
from pydantic import ValidationError

from docserializer.errors import InvalidParameter

NAME_MESSAGE = "Field name is required and should be of type string"
OPTIONS_MESSAGE = (
    "Field options is required and should be an object or array"
)


class PickList(BaseModel):
    """
    Serializer that keeps exactly the listed fields.
    """

    names: Tuple[Hashable, ...]

    model_config = {"frozen": True}


class FieldSpec(BaseModel):
    """
    Serializer built from optional include / exclude / modify steps.

    Field names are any hashable record keys. ``exclude`` wins over
    ``include`` on overlap. ``modify`` is a ``Modifier`` called as
    ``modify(serialized, original)`` and its return value replaces the
    projection; it is skipped when it is not callable.
    """

    include: Optional[Tuple[Hashable, ...]] = None
    exclude: Optional[Tuple[Hashable, ...]] = None
    modify: Optional[Any] = None

    model_config = {"frozen": True}


SerializerSpec = Union[PickList, FieldSpec]


class ByName(NamedTuple):
    name: str


class Inline(NamedTuple):
    options: Any


Selector = Union[ByName, Inline]


def validate_name(name: Any) -> str:
    if not name or not isinstance(name, str):
        raise InvalidParameter(NAME_MESSAGE)
    return name


def coerce_spec(options: Any) -> SerializerSpec:
    """
    Turn a pick list (list / tuple / set) or a dict into a spec.
    Anything else is rejected with InvalidParameter.
    """
    if isinstance(options, (PickList, FieldSpec)):
        return options
    # selectors are tuples too, but never a pick list
    if isinstance(options, (ByName, Inline)):
        raise InvalidParameter(OPTIONS_MESSAGE)
    try:
        if isinstance(options, (list, tuple, set, frozenset)):
            return PickList(names=tuple(options))
        if isinstance(options, Mapping):
            return FieldSpec.model_validate(dict(options))
    except ValidationError as e:
        raise InvalidParameter(OPTIONS_MESSAGE) from e
    raise InvalidParameter(OPTIONS_MESSAGE)


def to_selector(name_or_options: Any) -> Selector:
    if isinstance(name_or_options, (ByName, Inline)):
        return name_or_options
    if isinstance(name_or_options, str):
        return ByName(name_or_options)
    return Inline(name_or_options)
