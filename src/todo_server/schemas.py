from __future__ import annotations

import logging
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class DescriptionIn(BaseModel):
    """
    Request body for create and upsert: ``{"Description": <string>}``.

    The key is looked up the way a lenient JSON decoder maps object keys onto
    a field: exact name or any case variant. Each matching key holding a
    string overwrites the previous one; matches holding null or a non-string
    are skipped. Other keys are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"Description": "Buy groceries"}},
    )

    description: str = Field(default="", alias="Description", description="Free text of the todo item")

    @model_validator(mode="before")
    @classmethod
    def match_description_key(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matched = [
            value
            for key, value in data.items()
            if key.lower() == "description" and isinstance(value, str)
        ]
        return {"Description": matched[-1]} if matched else {}


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"Id": 0, "Description": "Buy groceries"}},
    )

    id: int = Field(..., alias="Id", description="Identifier of the todo item")
    description: str = Field(..., alias="Description", description="Free text of the todo item")


_todo_list_adapter = TypeAdapter(List[TodoOut])


# PUBLIC_INTERFACE
def parse_description(raw: bytes) -> str:
    """
    Decode a request body into its description.

    Malformed bodies are not an error: they decode to the empty description.
    """
    try:
        # Invalid UTF-8 becomes U+FFFD rather than failing the whole body.
        text = raw.decode("utf-8", errors="replace")
        return DescriptionIn.model_validate_json(text).description
    except ValidationError as exc:
        logger.debug("Ignoring undecodable request body: %s", exc)
        return ""


# PUBLIC_INTERFACE
def encode_todo(todo: TodoOut) -> bytes:
    """Serialize one item as ``{"Id": ..., "Description": ...}``."""
    return todo.model_dump_json(by_alias=True).encode("utf-8")


# PUBLIC_INTERFACE
def encode_todos(todos: List[TodoOut]) -> bytes:
    """Serialize a list of items as a JSON array."""
    return _todo_list_adapter.dump_json(todos, by_alias=True)
