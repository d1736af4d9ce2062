"""
Structured Logging for jsonresin.
Outputs one JSON object per event on stderr so stdout stays free for repaired documents.
"""

import json
import sys
import logging
from datetime import datetime, timezone

LOGGER_NAME = "jsonresin"

# Attributes every LogRecord carries; anything else arrived through 'extra'
RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)
handler = logging.StreamHandler(sys.stderr)
logger.addHandler(handler)


class JsonFormatter(logging.Formatter):
    """Render a record as {timestamp, level, component, event, ...fields}."""

    def format(self, record):
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "component": getattr(record, "component", record.module),
            "event": record.getMessage(),
        }

        for key, value in vars(record).items():
            if key in RECORD_ATTRS or key in log_record or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_record[key] = value
            except (TypeError, ValueError):
                log_record[key] = str(value)

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


handler.setFormatter(JsonFormatter())


def set_level(level: str) -> None:
    """Set the package log level by name (DEBUG, INFO, WARNING, ERROR)."""
    logger.setLevel(level.upper())


def get_logger(component: str = "core"):
    return ComponentLogger(component)


class ComponentLogger:
    """Logs events tagged with a component name; keyword arguments become fields."""

    def __init__(self, component):
        self.component = component
        self.logger = logging.getLogger(LOGGER_NAME)

    def _log(self, level, event, fields):
        fields["component"] = self.component
        self.logger.log(level, event, extra=fields)

    def debug(self, event, **fields):
        self._log(logging.DEBUG, event, fields)

    def info(self, event, **fields):
        self._log(logging.INFO, event, fields)

    def warning(self, event, **fields):
        self._log(logging.WARNING, event, fields)

    def error(self, event, **fields):
        self._log(logging.ERROR, event, fields)
