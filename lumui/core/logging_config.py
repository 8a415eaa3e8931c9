"""
Logging setup for lumui applications.

Renderers log through module loggers under the "lumui" namespace and never
touch handlers. Applications (the demo server, the showcase generator) call
setup_logging() once to choose between console and JSON output.

Context passed with `extra={...}` is kept on every record: JSONFormatter
writes it as top-level keys, ContextFormatter appends it as key=value pairs.

Usage:
    from lumui.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Rendered chart", extra={"chart": "donut", "segments": 3})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

PACKAGE_LOGGER = "lumui"

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """
    Collect the caller-supplied context of a record.

    Merges plain `extra={...}` keys with the `extra_fields` mapping set by
    log_with_context().
    """
    context = {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRIBUTES and key != "extra_fields"
    }
    context.update(getattr(record, "extra_fields", {}))
    return context


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line for log aggregation.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(record_context(record))
        return json.dumps(log_data, default=str)


class ContextFormatter(logging.Formatter):
    """
    Console formatter: colored level name on a terminal, context appended
    as key=value pairs.
    """

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_color: bool | None = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if self.use_color:
            record.levelname = f"{self.LEVEL_COLORS.get(levelname, '')}{levelname}{self.RESET}"
        try:
            line = super().format(record)
        finally:
            record.levelname = levelname

        context = record_context(record)
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


def setup_logging(level: str = "INFO", log_file: Path | None = None, json_output: bool = False) -> None:
    """
    Configure the root logger for an application.

    Replaces any existing root handlers, so calling it twice is safe.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (unknown names fall back to INFO)
        log_file: Optional file that receives JSON lines in addition to the console
        json_output: Write JSON instead of human-readable lines to the console

    Example:
        setup_logging(level="DEBUG")
        setup_logging(level="INFO", json_output=True)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if json_output:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            ContextFormatter(fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S")
        )
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    # Per-request lines from the demo server
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__ so records land under the lumui namespace."""
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log with keyword context instead of an `extra` dict.

    Example:
        log_with_context(logger, "info", "Showcase written", pages=2, output_dir="docs")
    """
    getattr(logger, level.lower())(message, extra={"extra_fields": context})


# Silent until the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
