from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 5318


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_HOST: interface the listener binds to. Default 'localhost'
    - TODO_PORT: TCP port of the listener. Default 5318
    - CORS_ALLOW_ORIGIN: value of the Access-Control-Allow-Origin header; '*' by default
    - LOG_LEVEL: standard logging level name. Default 'INFO'
    """

    host: str
    port: int
    cors_allow_origin: str
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 <= port <= 65535):
        return default
    return port


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        host=_get_env("TODO_HOST", DEFAULT_HOST).strip(),
        port=_parse_port(_get_env("TODO_PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        cors_allow_origin=_get_env("CORS_ALLOW_ORIGIN", "*").strip(),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
    )
