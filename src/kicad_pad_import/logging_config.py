"""Logging infrastructure for the pad importer.

Provides configurable levels and per-import correlation so that the
diagnostics of one footprint load can be told apart from the next.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

# Import ID tracking for import-level correlation
import_id_ctx: ContextVar[str | None] = ContextVar("import_id", default=None)


def get_import_id() -> str | None:
    """Get the current import ID if available."""
    return import_id_ctx.get()


class _ImportIdFilter(logging.Filter):
    """Make sure every record has an ``import_id`` for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "import_id"):
            record.import_id = get_import_id() or "-"
        return True


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] [import=%(import_id)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    # stderr keeps stdout free for the MCP stdio transport
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    console_handler.addFilter(_ImportIdFilter())
    logger.addHandler(console_handler)

    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("asyncio").propagate = False

    return logger


class ImportLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that automatically adds the import ID to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        import_id = get_import_id()
        if import_id is not None:
            extra["import_id"] = import_id
        kwargs["extra"] = extra
        return msg, kwargs


def create_logger(name: str) -> ImportLoggerAdapter:
    """Create and return a logger for a module.

    Args:
        name: The module name (typically __name__).

    Returns:
        A configured logger instance.
    """
    return ImportLoggerAdapter(logging.getLogger(name), {})
