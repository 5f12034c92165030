"""Root logger setup for the CLI and the HTTP server."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVEL_ENV = "ALBUMSCOUT_LOG_LEVEL"

# httpx logs every request line at INFO.
_HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Configure the root logger once.

    ``level`` defaults to ``ALBUMSCOUT_LOG_LEVEL`` (INFO when unset). The HTTP
    client libraries never log below WARNING unless debug output is requested.
    """

    effective_level = level if level is not None else log_level_from_env()
    logging.basicConfig(
        level=effective_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    client_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)


def log_level_from_env() -> int:
    name = optional_env_var(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"{LOG_LEVEL_ENV} must be a logging level name, got {name!r}")
    return level
