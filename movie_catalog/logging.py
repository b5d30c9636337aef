"""structlog setup for applications embedding the catalog client.

Library modules only emit events through ``get_logger``. Handlers are
attached to the ``movie_catalog`` logger namespace, never to the root
logger, so a host application's own logging setup is left alone.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LOGGER_NAMESPACE = "movie_catalog"
DEFAULT_LEVEL = "WARNING"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
]


def resolve_level(level: str | None = None) -> int:
    """Explicit ``level`` wins, then MOVIES_LOG_LEVEL, then LOG_LEVEL, then WARNING."""
    name = level or os.getenv("MOVIES_LOG_LEVEL") or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL
    return getattr(logging, name.upper(), logging.WARNING)


def _console_renderer_wanted(stream: Any) -> bool:
    log_format = os.getenv("LOG_FORMAT")
    if log_format:
        return log_format.lower() == "console"
    return bool(getattr(stream, "isatty", lambda: False)())


def _formatter(renderer: Any) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def setup_logging(
    log_file: str | os.PathLike | None = None,
    *,
    level: str | None = None,
) -> logging.Logger:
    """Send ``movie_catalog`` events to stderr, plus ``log_file`` when given.

    stderr is used so CLI output on stdout stays machine-readable. It renders
    for humans on a TTY (or LOG_FORMAT=console) and as JSON lines otherwise.
    The file always gets JSON lines. Calling this again replaces the handlers
    from the previous call.
    """
    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    stream = sys.stderr
    console = _console_renderer_wanted(stream)
    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(
        _formatter(structlog.dev.ConsoleRenderer() if console else structlog.processors.JSONRenderer())
    )
    handlers: list[logging.Handler] = [stream_handler]

    if log_file:
        directory = os.path.dirname(str(log_file))
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(_formatter(structlog.processors.JSONRenderer()))
        handlers.append(file_handler)

    namespace = logging.getLogger(LOGGER_NAMESPACE)
    for old in list(namespace.handlers):
        namespace.removeHandler(old)
        old.close()
    for handler in handlers:
        namespace.addHandler(handler)
    namespace.setLevel(resolve_level(level))
    namespace.propagate = False
    return namespace


def get_logger(name: str | None = None, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Return a logger under the ``movie_catalog`` namespace."""
    if not name:
        name = LOGGER_NAMESPACE
    elif name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return structlog.get_logger(name, **initial_values)
