"""Loguru setup shared by the HTTP app and the CLI."""

import logging
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from crm_api.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] {name}:{function}:{line} - <level>{message}</level>"
)

# Third-party loggers and the level they are allowed to emit at
_QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # request lines are written by the HTTP middleware
        if record.name == "uvicorn.access":
            return

        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(logger_name=record.name).log(
            level, record.getMessage()
        )


def _route_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for existing in logging.root.manager.loggerDict.values():
        if isinstance(existing, logging.Logger):
            existing.handlers.clear()
            existing.propagate = True
    for name, level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging() -> None:
    """(Re)build the loguru sinks from the current configuration.

    Always logs to stderr. A rotating file sink is added when ``logging.file``
    is set. Records default to ``request_id="-"`` outside of a request.
    """
    config = get_config()
    settings = config.logging
    verbose_errors = config.app.environment != "production"
    as_json = settings.format == "json"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    common: dict[str, Any] = {
        "level": settings.level,
        "format": "{message}" if as_json else PLAIN_FORMAT,
        "serialize": as_json,
        "backtrace": verbose_errors,
        "diagnose": verbose_errors,
    }
    logger.add(sys.stderr, colorize=not as_json, **common)

    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation=f"{settings.max_size_mb} MB",
            retention=settings.backup_count,
            compression="zip",
            enqueue=True,
            **common,
        )

    _route_stdlib_logging()
    logger.bind(level_name=settings.level, format=settings.format, file=settings.file).info(
        "Logging configured for {} environment", config.app.environment
    )
