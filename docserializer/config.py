from pydantic import BaseModel

DEFAULT_SERIALIZER = "_default"


class SerializerConfig(BaseModel):
    """
    Configuration for a serializer registry.
    """

    default_name: str = DEFAULT_SERIALIZER
    # Reject remove() of the built-in identity serializer
    protect_default: bool = False
    json_logging: bool = False
