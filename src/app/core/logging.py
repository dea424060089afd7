"""
Namakarana Structured JSON Logging

One JSON object per line. Engines never print; degraded paths
(missing Moon or Lagna, sunrise fallback, empty candidate lists)
are logged through the helpers below.
"""

import json
import logging
import sys

from typing import IO, Any

# Attributes every LogRecord carries; anything else came in via extra=
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record, plus its extra fields, as a single JSON line"""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        payload.update(
            (k, v) for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS
        )

        # Devanagari names stay readable in the log stream
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO", format_json: bool = True, stream: IO[str] | None = None
) -> None:
    """
    Configure the root logger

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: JSON lines when True, plain text otherwise
        stream: Output stream, stdout by default
    """
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        JsonFormatter()
        if format_json
        else logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))


def get_logger(name: str, extra_fields: dict[str, Any] | None = None) -> logging.Logger:
    """
    Get a logger, wrapped in a LoggerAdapter when extra_fields are given

    The adapter stamps extra_fields on every record it emits.
    """
    logger = logging.getLogger(name)
    if extra_fields:
        return logging.LoggerAdapter(logger, extra_fields)
    return logger


def get_engine_logger(engine: str) -> logging.Logger:
    """Logger for a naming engine (shadbala, hoda_chakra, ...)"""
    return get_logger(f"namakarana.engine.{engine}", {"layer": "engine", "domain": "naming"})


def get_ephemeris_logger() -> logging.Logger:
    return get_logger("namakarana.ephemeris", {"layer": "ephemeris", "backend": "swisseph"})


def get_api_logger(endpoint: str) -> logging.Logger:
    """Logger for API endpoints"""
    return get_logger(f"namakarana.api.{endpoint}", {"layer": "api", "type": "endpoint"})
