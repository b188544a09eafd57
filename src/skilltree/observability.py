"""Structured logging setup for skilltree.

Modules log through `get_logger(__name__)` with an event name and key/value
context, e.g. `logger.debug("graph_built", nodes=12, edges=15)`. Events always
go through the stdlib `logging` module; the `skilltree` logger carries a
NullHandler, so nothing is printed until the host application (or the CLI via
`configure_logging`) installs a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

PACKAGE_LOGGER = "skilltree"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger bound to the stdlib logger `name`.

    Processors come from the active structlog configuration at first use.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


def configure_logging(*, log_level: str = "WARNING", json_format: bool = False) -> None:
    """Configure structured logging.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON lines. If False, human-readable.
    """
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, log_level.upper()))
