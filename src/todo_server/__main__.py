"""
Entry point: ``python -m todo_server`` or the ``todo-server`` console script.

Binds the listener from settings and serves the app with uvicorn until the
process is killed.
"""
from __future__ import annotations

import logging
import socket
import sys

import uvicorn

from .logging_utils import configure_logging
from .main import create_app
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def main() -> None:
    """Start the todo server on the configured host and port."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        sock = socket.create_server((settings.host, settings.port))
    except OSError as exc:
        # Listener failures go to stdout.
        print(exc)
        sys.exit(1)

    logger.info("Listening on %s:%s", settings.host, settings.port)
    config = uvicorn.Config(
        app=create_app(settings=settings),
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=True,
    )
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    main()
