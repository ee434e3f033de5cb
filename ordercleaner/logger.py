"""Application logging: JSON structured logs and tagged debug lines."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from ordercleaner.helpers import stringify

_LEVEL_INFO = "Info"
_LEVEL_WARNING = "Warning"
_LEVEL_ERROR = "Error"
_DEBUG_LOG = "[Debug]: {}: {}: {}"

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}

_standard = logging.getLogger("ordercleaner")
_standard.setLevel(logging.INFO)


@dataclass
class LogFormatter:
    """The payload of a tagged debug log line."""

    level: str = ""
    time: datetime = field(default_factory=lambda: datetime.now().astimezone())
    ip: str = ""
    method: str = ""
    path: str = ""
    status_code: int = 0
    execution_time: timedelta = timedelta(0)
    request_body: Any = None
    request_json_body: Any = None
    response: Any = None
    message: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "time": self.time.isoformat(),
            "ip": self.ip,
            "method": self.method,
            "path": self.path,
            "status_code": self.status_code,
            "execution_time": (self.execution_time // timedelta(microseconds=1)) * 1000,
            "request": {"body": self.request_body, "json_body": self.request_json_body},
            "response": self.response,
            "message": self.message,
        }


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = dict(getattr(record, "fields", None) or {})
        entry["level"] = _LEVEL_NAMES.get(record.levelno, record.levelname.lower())
        entry["msg"] = record.getMessage()
        entry["time"] = datetime.fromtimestamp(record.created).astimezone().isoformat()
        return json.dumps(entry, sort_keys=True, default=str, ensure_ascii=False)


def set_formatter(topic: str, status_code: int, request: Any, response: Any) -> dict[str, Any]:
    """Build the structured fields attached to a log entry."""
    return {
        "app": os.environ.get("APPLICATION_NAME", ""),
        "topic": topic,
        "statusCode": status_code,
        "request": request,
    }


def new_logger() -> logging.Logger:
    """Return a fresh logger that writes JSON lines to standard error.

    Structured fields are passed as ``extra={"fields": {...}}``.
    """
    log = logging.Logger("ordercleaner.json", logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_JsonFormatter())
    log.addHandler(handler)
    return log


def _line(level: str, log_key: str, message: Any) -> str:
    payload = LogFormatter(level=level, message=message)
    try:
        encoded = stringify(payload.to_dict())
    except (TypeError, ValueError):
        encoded = ""
    return _DEBUG_LOG.format(level.upper(), log_key, encoded)


def info(log_key: str, message: Any) -> None:
    _standard.info(_line(_LEVEL_INFO, log_key, message))


def error(log_key: str, message: Any) -> None:
    _standard.error(_line(_LEVEL_ERROR, log_key, message))


def fatal(log_key: str, message: Any) -> None:
    """Log at the highest level and stop the process with exit status 1."""
    _standard.critical(_line(_LEVEL_ERROR, log_key, message))
    raise SystemExit(1)


def warning(log_key: str, message: Any) -> None:
    _standard.warning(_line(_LEVEL_WARNING, log_key, message))