from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from .routers import todos as todos_router
from .settings import Settings, get_settings
from .store import TodoStore
from .utils import InvalidTodoId, TodosCorrupted, cors_headers

logger = logging.getLogger(__name__)

openapi_tags = [
    {
        "name": "todos",
        "description": "Create, read, replace and delete todo items held in memory.",
    },
]


# PUBLIC_INTERFACE
def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a single store.

    Args:
        store: The store every handler shares. A new empty store is created when omitted.
        settings: Application settings; loaded from the environment when omitted.

    Returns:
        The configured FastAPI instance. The store is reachable as ``app.state.store``.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo Server",
        description="In-memory todo list over HTTP with integer ids assigned by the server.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.store = store if store is not None else TodoStore()
    app.state.settings = settings

    @app.exception_handler(InvalidTodoId)
    async def invalid_id_handler(request: Request, exc: InvalidTodoId) -> PlainTextResponse:
        """
        Reject a malformed id path segment with a plain-text 400.
        """
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return PlainTextResponse(
            "Invalid ID",
            status_code=status.HTTP_400_BAD_REQUEST,
            headers=cors_headers(settings.cors_allow_origin),
        )

    @app.exception_handler(TodosCorrupted)
    async def corrupted_handler(request: Request, exc: TodosCorrupted) -> PlainTextResponse:
        logger.error("%s %s: could not encode response: %s", request.method, request.url.path, exc)
        return PlainTextResponse(
            f'"todos corrupted: {exc}"',
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=cors_headers(settings.cors_allow_origin),
        )

    app.include_router(todos_router.router)
    return app


# ASGI target for `uvicorn todo_server.main:app`; built on import with its own empty store.
app = create_app()
