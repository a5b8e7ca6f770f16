# File: portfolio_edge/core/logging.py

"""
Logging setup for the portfolio API.

JSON lines in production, plain text locally. Call setup_logging() once
on startup (the app lifespan does this).
"""

import json
import logging
from datetime import datetime, timezone

# Extra fields surfaced from `logger.x(..., extra={...})`
EXTRA_FIELDS = ("path", "prefix", "record_key", "blob_key", "status_code")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    # Replace handlers installed by a previous call (reload, tests)
    for existing in list(root.handlers):
        if getattr(existing, "_portfolio_edge", False):
            root.removeHandler(existing)
    handler._portfolio_edge = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
