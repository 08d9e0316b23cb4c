"""Structured logging for the Fury Front combat core.

Engine modules log through structlog with keyword fields. The host
configures output once at startup, normally straight from the
application settings:

    >>> from fury_front.core.logging import configure_logging, get_logger
    >>> configure_logging()  # level, format and file from get_settings()
    >>> get_logger(__name__).info("Weapon equipped", weapon_id="rifle_ak")

Per-session fields are attached with log_context(), so every entry emitted
while a session is ticking carries its session id.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from fury_front.core.config import Settings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def app_context_processor(app_name: str, app_version: str) -> Processor:
    """Build a processor that stamps entries with the application identity.

    Args:
        app_name: Value for the ``app`` key.
        app_version: Value for the ``version`` key.
    """

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("version", app_version)
        return event_dict

    return add_app_context


def _render_processors(json_format: bool) -> list[Processor]:
    if json_format:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def _resolve_level(settings: Settings, level: str | None) -> int:
    if level is not None:
        name = level
    elif settings.debug:
        name = "DEBUG"
    else:
        name = settings.log_level
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure application-wide logging.

    Keyword arguments override the matching settings. Debug mode forces
    DEBUG level unless a level is passed explicitly.

    Args:
        settings: Application settings. Defaults to get_settings().
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render JSON lines instead of console output.
        log_file: Also write standard library log records to this file.

    Raises:
        ConfigurationError: If settings must be loaded and are invalid.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    settings = settings if settings is not None else get_settings()
    log_level = _resolve_level(settings, level)
    use_json = settings.json_logs if json_format is None else json_format
    log_file = log_file if log_file is not None else settings.log_file

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            app_context_processor(settings.app_name, settings.app_version),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_render_processors(use_json),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Host engines and tooling usually log through the standard library
    logging.basicConfig(format=STDLIB_FORMAT, level=log_level, stream=sys.stdout, force=True)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(STDLIB_FORMAT))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind context variables for the duration of a block.

    Previously bound values are restored on exit, so nested sessions do
    not leak their fields into each other.

    Example:
        >>> with log_context(session_id="a1b2"):
        ...     session.tick()
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__all__ = [
    "app_context_processor",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "log_context",
]
