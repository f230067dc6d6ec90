from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic_core import PydanticSerializationError

from ..schemas import TodoOut, encode_todo, encode_todos, parse_description
from ..store import TodoStore
from ..utils import TodosCorrupted, cors_headers, id_segment, parse_todo_id, preflight_headers

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_ITEM_RESPONSES = {
    200: {"model": TodoOut, "description": "The todo item"},
    400: {"description": "Invalid ID"},
}


def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


def get_allow_origin(request: Request) -> str:
    return request.app.state.settings.cors_allow_origin


async def _raw_body(request: Request) -> bytes:
    return await request.body()


def _json_response(encode: Callable[[], bytes], origin: str) -> Response:
    try:
        body = encode()
    except PydanticSerializationError as exc:
        raise TodosCorrupted(str(exc)) from exc
    return Response(
        content=body,
        status_code=status.HTTP_200_OK,
        media_type="application/json",
        headers=cors_headers(origin),
    )


# PUBLIC_INTERFACE
@router.get(
    "",
    summary="List Todos",
    description="Return every stored todo item as a JSON array, in no particular order.",
    responses={200: {"model": list[TodoOut], "description": "All todo items"}},
)
@router.head("", include_in_schema=False)
def list_todos(
    store: TodoStore = Depends(get_store),
    origin: str = Depends(get_allow_origin),
) -> Response:
    """
    List every todo item.
    """
    with store.lock:
        items = store.list_all()
        return _json_response(lambda: encode_todos([TodoOut(**it) for it in items]), origin)


# PUBLIC_INTERFACE
@router.post(
    "",
    summary="Create Todo",
    description=(
        "Create a todo item from a `{\"Description\": ...}` body and return it with its new id. "
        "A body that cannot be decoded is treated as an empty description."
    ),
    responses={200: {"model": TodoOut, "description": "Todo created"}},
)
def create_todo(
    raw: bytes = Depends(_raw_body),
    store: TodoStore = Depends(get_store),
    origin: str = Depends(get_allow_origin),
) -> Response:
    """
    Create a new Todo.
    """
    with store.lock:
        created = store.create(parse_description(raw))
        logger.info("Created todo %d", created["id"])
        return _json_response(lambda: encode_todo(TodoOut(**created)), origin)


# PUBLIC_INTERFACE
@router.get(
    "/{rest:path}",
    summary="Get Todo",
    description=(
        "Return the todo item at the given id. A missing id is not an error: "
        "the item comes back with an empty description."
    ),
    responses=_ITEM_RESPONSES,
)
@router.head("/{rest:path}", include_in_schema=False)
def retrieve_todo(
    rest: str,
    store: TodoStore = Depends(get_store),
    origin: str = Depends(get_allow_origin),
) -> Response:
    """
    Retrieve a single Todo item by its ID.
    """
    with store.lock:
        todo_id = parse_todo_id(id_segment(rest))
        description = store.get(todo_id)
        return _json_response(lambda: encode_todo(TodoOut(id=todo_id, description=description)), origin)


# PUBLIC_INTERFACE
@router.put(
    "/{rest:path}",
    summary="Create or Replace Todo",
    description=(
        "With an empty id segment (`PUT /todos/`) this creates a new item exactly like "
        "`POST /todos`. Otherwise the item at the given id is inserted or overwritten; "
        "an explicit id never advances the id counter."
    ),
    responses=_ITEM_RESPONSES,
)
def upsert_todo(
    rest: str,
    raw: bytes = Depends(_raw_body),
    store: TodoStore = Depends(get_store),
    origin: str = Depends(get_allow_origin),
) -> Response:
    """
    Create a Todo, or replace the one at the given ID.
    """
    segment = id_segment(rest)
    with store.lock:
        description = parse_description(raw)
        todo_id = None if segment == "" else parse_todo_id(segment)
        saved = store.upsert(todo_id, description)
        logger.info("Upserted todo %d", saved["id"])
        return _json_response(lambda: encode_todo(TodoOut(**saved)), origin)


# PUBLIC_INTERFACE
@router.delete(
    "/{rest:path}",
    summary="Delete Todo",
    description=(
        "Remove the todo item at the given id and return its former value. "
        "Deleting a missing id succeeds and returns an empty description."
    ),
    responses=_ITEM_RESPONSES,
)
def delete_todo(
    rest: str,
    store: TodoStore = Depends(get_store),
    origin: str = Depends(get_allow_origin),
) -> Response:
    """
    Delete a Todo and return its former value.
    """
    with store.lock:
        todo_id = parse_todo_id(id_segment(rest))
        description = store.delete(todo_id)
        logger.info("Deleted todo %d", todo_id)
        return _json_response(lambda: encode_todo(TodoOut(id=todo_id, description=description)), origin)


# PUBLIC_INTERFACE
@router.options("", summary="Preflight", include_in_schema=False)
@router.options("/{rest:path}", summary="Preflight", include_in_schema=False)
def preflight(origin: str = Depends(get_allow_origin)) -> Response:
    """
    Answer CORS preflight requests with the allowed methods and headers.
    """
    return Response(status_code=status.HTTP_200_OK, headers=preflight_headers(origin))
