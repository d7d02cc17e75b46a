"""Structured logging configuration using structlog.

contools loggers are structlog loggers wrapping a stdlib ``logging`` logger
under the ``contools`` namespace. Until an application configures logging,
stdlib's defaults drop everything below WARNING, so library debug events
never reach the terminal in the middle of a prompt.
"""

import logging as stdlib_logging
import sys
from typing import Any

import structlog

# Handler installed on the root logger by configure_logging
_handler: stdlib_logging.Handler | None = None


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure structlog for contools.

    Events are rendered by structlog and written through stdlib logging to
    stderr, so they never mix with prompts and dumped values on stdout.
    Calling this again replaces the previous handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output JSON format. If False, use console-friendly format.
    """
    global _handler

    numeric_level = getattr(stdlib_logging, level.upper(), stdlib_logging.INFO)
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = stdlib_logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = stdlib_logging.StreamHandler(sys.stderr)
    _handler.setFormatter(stdlib_logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    root.setLevel(numeric_level)


def reset_logging() -> None:
    """Undo configure_logging (useful for testing)."""
    global _handler
    root = stdlib_logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler = None
    root.setLevel(stdlib_logging.WARNING)
    structlog.reset_defaults()


def configure_from_settings() -> None:
    """Configure logging from the CONTOOLS_LOG_* settings."""
    from contools.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger backed by the stdlib logger of the same name.

    Processors and level filtering still come from the structlog
    configuration at call time.

    Args:
        name: Logger name, normally the calling module's ``__name__``.
            Defaults to "contools".

    Returns:
        Lazily bound structlog logger.
    """
    return structlog.wrap_logger(stdlib_logging.getLogger(name or "contools"))
