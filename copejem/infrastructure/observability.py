"""Structured Logging: JSON log lines carrying entity and actor context.

Invariants:
    - Every line has timestamp, level, logger name, and message
    - Extra fields (entity_kind, entity_id, actor_id, audit, year, error_code)
      surfaced when present
    - log_format "json" selects JSONFormatter; anything else a plain text line

Design Decisions:
    - setup_logging called once on startup via lifespan
    - Audit signals (past-year project edits) are ordinary WARNING records
      tagged with `audit`, so any handler can route them
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "entity_kind", "entity_id", "actor_id", "audit", "year",
    "error_code", "path", "operation",
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
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
