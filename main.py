import logging
import uuid
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

import uvicorn
from fastapi import Depends
from fastapi import FastAPI
from fastapi import HTTPException
from pydantic import BaseModel

from docserializer.config import SerializerConfig
from docserializer.document import Document
from docserializer.fastapi_utils import add_exception_handlers
from docserializer.fastapi_utils import view_selector
from docserializer.log_config import configure_logging
from docserializer.serializers.registry import SerializerRegistry

# Configure logging level
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("docserializer.main")

# ─────────────────────────────────────────────────────────────────────────────
# 0. Payload models
# ─────────────────────────────────────────────────────────────────────────────


class CreateUserPayload(BaseModel):
    name: str
    email: str
    password_hash: str
    role: str = "member"
    first_name: Optional[str] = None
    last_name: Optional[str] = None


# ─────────────────────────────────────────────────────────────────────────────
# 1. Serializers for the user model
# ─────────────────────────────────────────────────────────────────────────────

cfg = SerializerConfig(protect_default=True, json_logging=False)
configure_logging(cfg.json_logging)

users = SerializerRegistry(cfg)


def _with_display_name(
    serialized: Dict[str, Any], original: Dict[str, Any]
) -> Dict[str, Any]:
    parts = [original.get("first_name"), original.get("last_name")]
    display = " ".join(p for p in parts if p) or original["name"]
    return {**serialized, "display_name": display}


users.add("summary", ["id", "name"])
users.add(
    "public",
    {
        "include": ["id", "name", "first_name", "last_name"],
        "modify": _with_display_name,
    },
)
users.add("admin", {"exclude": ["password_hash"]})
users.set_default("public")

# in-memory document collection keyed by id
collection: Dict[str, Document] = {}

# ─────────────────────────────────────────────────────────────────────────────
# 2. FastAPI app
# ─────────────────────────────────────────────────────────────────────────────

app: FastAPI = FastAPI()
add_exception_handlers(app)
select_view = view_selector(users)


@app.post("/users/")
async def create_user(
    payload: CreateUserPayload, view: Optional[str] = Depends(select_view)
) -> Dict[str, Any]:
    user_id = str(uuid.uuid4())
    doc = Document({"id": user_id, **payload.model_dump()}, users)
    collection[user_id] = doc
    logger.info("Created user %s", user_id)
    return doc.serialize(view)


@app.get("/users/")
async def list_users(
    view: Optional[str] = Depends(select_view),
) -> Dict[str, List[Dict[str, Any]]]:
    return {"users": users.serialize_many(list(collection.values()), view)}


@app.get("/users/{user_id}")
async def get_user(
    user_id: str, view: Optional[str] = Depends(select_view)
) -> Dict[str, Any]:
    doc = collection.get(user_id)
    if doc is None:
        raise HTTPException(status_code=404, detail="User not found")
    return doc.serialize(view)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
