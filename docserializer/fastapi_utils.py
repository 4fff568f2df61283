from typing import Callable
from typing import Optional

from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse

from docserializer.errors import InvalidParameter
from docserializer.log_config import logger
from docserializer.serializers.registry import SerializerRegistry


def view_selector(
    registry: SerializerRegistry, param: str = "view"
) -> Callable[[Request], Optional[str]]:
    """
    Returns a FastAPI dependency that reads the serializer name from the
    `param` query parameter. A missing parameter yields None, i.e. the
    registry's current default; an unregistered name is rejected.
    """

    def _selector(request: Request) -> Optional[str]:
        name = request.query_params.get(param)
        if name is None:
            return None
        if name not in registry:
            raise InvalidParameter(f"Unknown serializer '{name}'")
        return name

    return _selector


def add_exception_handlers(app: FastAPI) -> None:
    """Report InvalidParameter as HTTP 400."""

    async def _invalid_parameter(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url, exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    app.add_exception_handler(InvalidParameter, _invalid_parameter)
