from __future__ import annotations

import contextvars
import logging
import sys
import uuid
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Carries the request id across awaits within one request
_request_id_ctx: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime", "request_id", "taskName"}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | request_id=%(request_id)s | %(message)s"


def get_request_id() -> str:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """Inject request_id from contextvars into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = get_request_id()
        return True


class ContextFormatter(logging.Formatter):
    """Renders ``extra`` fields after the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()
        line = super().format(record)
        fields = [
            f"{key}={value}" for key, value in record.__dict__.items() if key not in _RECORD_ATTRS and not key.startswith("_")
        ]
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        return f"{head} | {' '.join(fields)}{sep}{tail}"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a single stdout handler.

    Safe to call repeatedly; existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(ContextFormatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a request id to each request and echo it in ``X-Request-ID``."""

    async def dispatch(self, request: Request, call_next):
        incoming: Optional[str] = request.headers.get("X-Request-ID")
        rid = incoming or uuid.uuid4().hex
        request.state.request_id = rid
        token = _request_id_ctx.set(rid)
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = rid
            return response
        finally:
            _request_id_ctx.reset(token)
