"""
Logger setup per environment.

- local: human-readable text, DEBUG
- dev:   JSON lines, DEBUG
- prod:  JSON lines, INFO

Structured fields are passed with ``extra=`` (e.g. ``op``, ``alias``,
``error``); the JSON formatter emits them as top-level keys and the text
formatter appends them as ``key=value`` pairs.
"""

import json
import logging
import sys
from typing import Optional

LOGGER_NAME = "alias_shortener"

ENV_LOCAL = "local"
ENV_DEV = "dev"
ENV_PROD = "prod"

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


def setup_logger(env: str, stream=None, name: Optional[str] = None) -> logging.Logger:
    """
    Configure and return the application logger for the given environment.

    Args:
        env: One of "local", "dev", "prod"
        stream: Output stream (defaults to stdout)
        name: Logger name (defaults to the package logger)

    Raises:
        ValueError: If env is unknown
    """
    if env == ENV_LOCAL:
        level, formatter = logging.DEBUG, TextFormatter()
    elif env == ENV_DEV:
        level, formatter = logging.DEBUG, JSONFormatter()
    elif env == ENV_PROD:
        level, formatter = logging.INFO, JSONFormatter()
    else:
        raise ValueError(f"Unknown environment: {env!r}")

    logger = logging.getLogger(name or LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
