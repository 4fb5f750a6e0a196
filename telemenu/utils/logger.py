"""Structured logging with a per-press correlation ID

The correlation ID lives in a context variable, so every ``StructuredLogger``
sees the ID of the button press currently being handled, including inside
tasks spawned while handling it.
"""

import json
import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar(
    "telemenu_correlation_id", default=None
)


def current_correlation_id() -> Optional[str]:
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str = None) -> Iterator[str]:
    """Tag all log records in the block with one correlation ID"""
    token = _correlation_id.set(correlation_id or str(uuid.uuid4())[:8])
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


class StructuredLogger:
    """JSON log lines carrying the active correlation ID and extra fields"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    @property
    def correlation_id(self) -> Optional[str]:
        return _correlation_id.get()

    def _log(self, level: int, message: str, **fields):
        if not self.logger.isEnabledFor(level):
            return
        record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": logging.getLevelName(level),
            "message": message,
            "correlation_id": self.correlation_id,
            **fields,
        }
        self.logger.log(level, json.dumps(record, default=str))

    def info(self, message: str, **fields):
        self._log(logging.INFO, message, **fields)

    def warning(self, message: str, **fields):
        self._log(logging.WARNING, message, **fields)

    def error(self, message: str, **fields):
        self._log(logging.ERROR, message, **fields)

    def debug(self, message: str, **fields):
        self._log(logging.DEBUG, message, **fields)


def get_logger(name: str) -> StructuredLogger:
    """Get structured logger instance"""
    return StructuredLogger(name)
