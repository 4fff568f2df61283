from typing import Any
from typing import Dict
from typing import Optional

import pytest
from fastapi import Depends
from fastapi import FastAPI
from fastapi.testclient import TestClient

from docserializer.document import Document
from docserializer.fastapi_utils import add_exception_handlers
from docserializer.fastapi_utils import view_selector


@pytest.fixture
def fastapi_app(registry):
    registry.add("public", {"exclude": ["password"]})
    registry.add("summary", ["id"])
    registry.set_default("public")
    doc = Document({"id": 1, "name": "ada", "password": "x"}, registry)

    app = FastAPI()
    add_exception_handlers(app)

    @app.get("/doc")
    async def get_doc(
        view: Optional[str] = Depends(view_selector(registry)),
    ) -> Dict[str, Any]:
        return doc.serialize(view)

    @app.get("/inline")
    async def get_inline() -> Dict[str, Any]:
        return registry.serialize_one(doc, "stale")

    return app


def test_default_view(fastapi_app):
    with TestClient(fastapi_app) as client:
        resp = client.get("/doc")
        assert resp.status_code == 200
        assert resp.json() == {"id": 1, "name": "ada"}


def test_named_view(fastapi_app):
    with TestClient(fastapi_app) as client:
        assert client.get("/doc", params={"view": "summary"}).json() == {
            "id": 1
        }


def test_unknown_view_is_400(fastapi_app, caplog):
    caplog.set_level("INFO")
    with TestClient(fastapi_app) as client:
        resp = client.get("/doc", params={"view": "nope"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Unknown serializer 'nope'"}
    assert "Rejected GET" in caplog.text


def test_invalid_parameter_from_handler_is_400(fastapi_app):
    with TestClient(fastapi_app) as client:
        resp = client.get("/inline")
    assert resp.status_code == 400
    assert "should be an object or array" in resp.json()["detail"]
