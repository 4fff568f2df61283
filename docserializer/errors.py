class DocSerializerError(Exception):
    """Base class for errors raised by docserializer."""


class InvalidParameter(DocSerializerError, ValueError):
    """
    A caller passed a malformed name, serializer spec or document list.
    """
