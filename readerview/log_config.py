"""Loguru logging configuration for readerview.

Call :func:`configure_logging` once at application startup (the CLI and the
API do this for you).  Library code simply does ``from loguru import logger``.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

from readerview.config import settings

_VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class InterceptHandler(logging.Handler):
    """Redirect standard library log records (httpx, trafilatura, ...) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(log_level: str | None = None, enable_json: bool = False) -> None:
    """Configure loguru sinks and intercept stdlib logging.

    Args:
        log_level: Log level name.  Defaults to ``settings.log_level``; unknown
            names fall back to ``INFO``.
        enable_json: Emit serialized JSON records instead of the coloured
            human-readable format.
    """
    level = (log_level or settings.log_level).upper()
    if level not in _VALID_LEVELS:
        level = "INFO"

    logger.remove()
    if enable_json:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=level,
            colorize=True,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level>"
            ),
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Third-party loggers are chatty at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("trafilatura").setLevel(logging.WARNING)
    logging.getLogger("readability").setLevel(logging.WARNING)

    logger.debug(f"Logging configured: level={level}, json={enable_json}")


__all__ = ["logger", "configure_logging"]
