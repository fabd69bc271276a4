"""Structured Logging — store context on every line, JSON or key=value text.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Store context (batch_id, operation, path, line_number, record_count,
      error_code, raw) is surfaced in both formats when present
    - raw is clipped to RAW_PREVIEW characters: a damaged line can be long
    - JSON format by default, "text" format for reading at a terminal

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once from open_store(); repeated calls replace the
      previous store handler instead of stacking a second one
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_KEYS: tuple[str, ...] = (
    "batch_id", "operation", "path", "line_number", "record_count",
    "error_code", "raw",
)
RAW_PREVIEW: int = 120

_HANDLER_TAG = "_medstock"


def store_context(record: logging.LogRecord) -> dict:
    """Extract the store context fields carried by a log record."""
    context = {}
    for key in CONTEXT_KEYS:
        val = record.__dict__.get(key)
        if val is None:
            continue
        if key == "raw":
            val = str(val)[:RAW_PREVIEW]
        context[key] = val
    return context


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(store_context(record))
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with store context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = store_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={val!r}" for key, val in context.items())
        first, sep, rest = line.partition("\n")
        return f"{first} [{pairs}]{sep}{rest}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the store's root handler, replacing one from an earlier call."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
