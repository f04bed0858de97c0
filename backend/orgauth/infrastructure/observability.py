"""Structured Logging — JSON formatter and setup for orgauth's log stream.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Only LOG_EXTRA_FIELDS are emitted: a password or password hash passed as an
      extra is dropped by the formatter, so credentials never reach the stream
    - Rejections carry entity, field and error_code so a failed admission can be
      traced to the rule that fired, without the rejected value itself
    - JSON format in production, human-readable in development

Design Decisions:
    - Allow-list over deny-list: a new field on UserCandidate cannot leak by accident
    - setup_logging_from_settings reads LOG_LEVEL and LOG_FORMAT from Settings
"""

import logging
import json
from datetime import datetime, timezone

from orgauth.config import Settings, get_settings


LOG_EXTRA_FIELDS: tuple[str, ...] = (
    "entity", "field", "error_code", "username", "operation", "user_id",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in LOG_EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Handler:
    """Configure root logging from LOG_LEVEL and LOG_FORMAT."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
