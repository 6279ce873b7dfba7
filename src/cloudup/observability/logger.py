"""Structured JSON logger for cloudup.

Every log record is emitted as a single-line JSON object::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "INFO",
     "logger": "cloudup.service", "message": "Upload complete",
     "op": "upload", "public_id": "css/default", "format": "png"}

Library loggers default to ``INFO``: per-upload progress is logged at
``DEBUG`` unless the client is verbose, so quiet runs print nothing but
warnings.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger``, ``message``,
    the fields passed through ``extra={"extra_fields": {...}}`` and, when
    an exception is attached, ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "extra_fields", {}),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def get_logger(
    name: str = "cloudup",
    *,
    level: int = logging.INFO,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Return the logger *name* with a JSON handler on *stream* (stderr).

    The handler and *level* are installed on first use only; later calls
    return the logger unchanged, so callers may lower its level to see
    ``DEBUG`` progress.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(h.formatter, StructuredFormatter) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger
