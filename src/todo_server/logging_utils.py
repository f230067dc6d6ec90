"""Logging setup for the todo server."""

from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s level=%(levelname)s logger=%(name)s message="%(message)s"'


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root_logger.setLevel(level)
