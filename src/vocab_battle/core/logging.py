"""Structured logging configuration for the vocab battle engine.

Logging goes through structlog so battle events carry structured fields
(difficulty, turn, phase, damage) rather than formatted strings. Events are
handed to the standard library ``logging`` root logger, whose handlers
render them: human-readable during development and JSON when
``json_format`` is set. An optional log file receives the same events.

Example:
    >>> from vocab_battle.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Turn judged", turn=3, player_correct=True)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from vocab_battle.core.config import Settings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add application context to log entries.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event dictionary to modify.

    Returns:
        The modified event dictionary with app context.
    """
    event_dict["app"] = "vocab_battle"
    return event_dict


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | Path | None = None,
    settings: Settings | None = None,
) -> None:
    """Configure application-wide logging.

    Values left as None are read from ``settings`` (``get_settings()`` by
    default): ``log_level``, raised to DEBUG when ``debug`` is on, and
    ``log_json``.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs in JSON format.
        log_file: Optional path to a log file for persistent logging.
        settings: Settings to fall back on for omitted values.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    if level is None or json_format is None:
        settings = settings or get_settings()
        if level is None:
            level = "DEBUG" if settings.debug else settings.log_level
        if json_format is None:
            json_format = settings.log_json

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        console_chain: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
        file_chain: list[Processor] = console_chain
    else:
        console_chain = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]
        file_chain = [
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    level_value = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    def formatter(render_chain: list[Processor]) -> logging.Formatter:
        # Records from plain stdlib loggers go through the shared chain too
        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *render_chain,
            ],
            foreign_pre_chain=shared_processors,
        )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter(console_chain))
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level_value)
        file_handler.setFormatter(formatter(file_chain))
        handlers.append(file_handler)

    logging.basicConfig(handlers=handlers, level=level_value, force=True)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    The battle engine binds ``battle_id`` and ``difficulty`` when a battle
    starts so every turn log can be correlated.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(battle_id="abc123", difficulty=2)
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove the given keys from the logging context, leaving the rest bound.

    Args:
        *keys: Names previously passed to ``bind_context``.
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
