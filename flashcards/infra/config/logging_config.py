"""
Structlog setup for the flashcards library.

Loggers are named after the layer that owns them ("repo.card", "record_store",
"review.session") and emit dotted event names. Per-operation context such as
deck_id is attached with bound_context() and dropped when the block exits.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import structlog

from flashcards.infra.config.settings import Settings

# Third-party loggers that are noisy at INFO unless SQL echo is requested
_SQL_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite")


def setup_logging(settings: Settings) -> None:
    """Configure structlog and stdlib logging from the given settings.

    LOG_LEVEL picks the threshold, LOG_FORMAT picks "json" or "console"
    rendering. SQLAlchemy and aiosqlite stay at WARNING unless DATABASE_ECHO
    is on.
    """
    level = logging.getLevelName((settings.log_level or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    fmt = (settings.log_format or "json").lower()

    logging.basicConfig(level=level, format="%(message)s")
    sql_level = logging.INFO if settings.debug_sql else logging.WARNING
    for name in _SQL_LOGGERS:
        logging.getLogger(name).setLevel(max(level, sql_level))

    renderer = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if fmt == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
    structlog.get_logger("logging").debug(
        "logging.configured", level=logging.getLevelName(level), format=fmt
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:  # type: ignore[name-defined]
    """Get a structlog logger bound with a name."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


@contextmanager
def bound_context(**kwargs) -> Iterator[None]:
    """Attach context (deck_id, card_id) to log lines for the duration of a block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield

