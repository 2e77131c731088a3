"""Logging for toolspec.

Library modules log through ``get_logger``, which wraps a stdlib logger
under the ``toolspec`` namespace. Until an application configures logging,
those events go nowhere: the namespace carries a NullHandler and the
stdlib root logger drops debug and info. ``configure_logging`` is what the
CLI calls to turn them into JSON lines or console output on stderr.
"""

import logging
import sys
from typing import Any

import structlog

__all__ = ["configure_logging", "get_logger"]

LOGGER_NAMESPACE = "toolspec"

logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAMESPACE) -> Any:
    """Return a structlog logger bound to the stdlib logger ``name``.

    Args:
        name: Dotted logger name, usually the calling module's ``__name__``
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Send toolspec logs to stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to INFO
        log_format: "json" for JSON lines, "console" for human-readable
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    # stdout carries validation results
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
