from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item held by the store.

    Fields:
    - id: Integer identifier, assigned by the store counter or chosen by the client on upsert
    - description: Free text, empty string allowed
    """

    id: int
    description: str
