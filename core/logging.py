"""Logging bootstrap built on top of structlog."""
from __future__ import annotations

import logging
import os
import sys
from typing import cast

import structlog
from structlog.stdlib import BoundLogger


def _configure_structlog(json_mode: bool, level: int) -> None:
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        timestamper,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_mode:
        processors = shared_processors + [structlog.processors.EventRenamer("message"), structlog.processors.JSONRenderer(ensure_ascii=False)]
    else:
        processors = shared_processors + [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False)
        ]

    # логи уходят в stderr, чтобы не мешаться с выводом мяуканий в stdout
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def setup_logging(level: str = "INFO", *, json_mode: bool | None = None, diag: bool = False) -> None:
    """Initialise standard logging and structlog."""
    numeric_level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    if diag:
        numeric_level = logging.DEBUG
    logging.basicConfig(level=numeric_level, stream=sys.stderr, format="%(message)s")
    if json_mode is None:
        json_mode = os.getenv("ENV", "dev").lower() == "prod"
    _configure_structlog(json_mode, numeric_level)


def get_logger(name: str) -> BoundLogger:
    return cast(BoundLogger, structlog.get_logger(name))

