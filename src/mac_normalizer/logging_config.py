"""Logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# LogRecord attributes passed through `extra=` that the formatters emit
EXTRA_FIELDS = ("mac", "status")


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class KeyValueFormatter(logging.Formatter):
    """Key-value log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        parts = [
            f"ts={timestamp}",
            f"level={record.levelname}",
            f"msg=\"{record.getMessage()}\"",
        ]

        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                parts.append(f"{name}={getattr(record, name)}")

        return " ".join(parts)


def setup_logging(
    level: str = "INFO",
    format_type: str = "text",  # "text", "json", "kv"
):
    """Configure logging for the command-line tool."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the rendered addresses
    handler = logging.StreamHandler(sys.stderr)

    if format_type == "json":
        handler.setFormatter(JSONFormatter())
    elif format_type == "kv":
        handler.setFormatter(KeyValueFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root_logger.addHandler(handler)
