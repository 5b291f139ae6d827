"""Structured Logging: JSON formatter, request trace id, and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (trace_id, error_code, path, model_id) surfaced when present
    - trace_id comes from a ContextVar: task-local, never shared between requests
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter built on logging.Formatter, one JSON object per line
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)

_EXTRA_FIELDS = ("trace_id", "error_code", "path", "model_id", "status_code")


class TraceIdFilter(logging.Filter):
    """Attach the current request's trace id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "trace_id", None) is None:
            record.trace_id = trace_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.addFilter(TraceIdFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(trace_id)s] %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
