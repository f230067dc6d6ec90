from __future__ import annotations

import re
from typing import Dict

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


# PUBLIC_INTERFACE
class InvalidTodoId(ValueError):
    """Raised when the id path segment is not a signed 64-bit decimal integer."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"invalid todo id: {segment!r}")
        self.segment = segment


# PUBLIC_INTERFACE
class TodosCorrupted(RuntimeError):
    """Raised when a response body cannot be serialized."""


# PUBLIC_INTERFACE
def id_segment(rest: str) -> str:
    """
    Return the path segment directly after ``/todos/``.

    ``rest`` is everything after the prefix; deeper segments are ignored,
    so ``"12/extra"`` yields ``"12"`` and ``""`` yields ``""``.
    """
    return rest.split("/", 1)[0]


# PUBLIC_INTERFACE
def parse_todo_id(segment: str) -> int:
    """
    Parse an id segment.

    Accepts an optional sign followed by ASCII digits, within the signed
    64-bit range. Anything else (empty, whitespace, underscores, floats)
    raises InvalidTodoId.
    """
    if not _ID_PATTERN.fullmatch(segment):
        raise InvalidTodoId(segment)
    value = int(segment)
    if not (_INT64_MIN <= value <= _INT64_MAX):
        raise InvalidTodoId(segment)
    return value


# PUBLIC_INTERFACE
def cors_headers(origin: str) -> Dict[str, str]:
    """Headers carried by every /todos response."""
    return {"Access-Control-Allow-Origin": origin}


# PUBLIC_INTERFACE
def preflight_headers(origin: str) -> Dict[str, str]:
    """Headers answering an OPTIONS request on /todos."""
    return {
        **cors_headers(origin),
        "Allow": "GET,POST",
        "Access-Control-Allow-Methods": "GET,POST",
        "Access-Control-Allow-Headers": "Content-Type",
    }
