"""
In-memory todo server package.

Exposes the application factory and the store so callers can build an app
around a store they own.
"""

from .main import create_app
from .store import TodoStore

__all__ = ["TodoStore", "create_app"]
