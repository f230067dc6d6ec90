from __future__ import annotations

from threading import RLock
from typing import Dict, List, Optional

from .models import TodoEntity


# PUBLIC_INTERFACE
class TodoStore:
    """
    Thread-safe in-memory todo store.

    Holds the id -> description map and the next-id counter behind a single
    re-entrant lock. Every public method takes the lock for its whole
    duration; callers may also hold ``lock`` around several steps.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, str] = {}
        self._next_id = 0

    @property
    def lock(self) -> RLock:
        return self._lock

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def list_all(self) -> List[TodoEntity]:
        """Return a snapshot of every stored item."""
        with self._lock:
            return [{"id": i, "description": d} for i, d in self._items.items()]

    def create(self, description: str) -> TodoEntity:
        """Store ``description`` under the next counter id."""
        with self._lock:
            todo_id = self._allocate_id()
            self._items[todo_id] = description
            return {"id": todo_id, "description": description}

    def get(self, todo_id: int) -> str:
        """Return the description for ``todo_id``, or "" when absent."""
        with self._lock:
            return self._items.get(todo_id, "")

    def upsert(self, todo_id: Optional[int], description: str) -> TodoEntity:
        """
        Create when ``todo_id`` is None, otherwise insert or overwrite at
        ``todo_id``. An explicit id never moves the counter.
        """
        with self._lock:
            if todo_id is None:
                return self.create(description)
            self._items[todo_id] = description
            return {"id": todo_id, "description": description}

    def delete(self, todo_id: int) -> str:
        """Remove ``todo_id`` and return its former description ("" when absent)."""
        with self._lock:
            return self._items.pop(todo_id, "")
