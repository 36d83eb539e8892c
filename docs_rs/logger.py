#!/usr/bin/env python3
"""
Logging configuration module for the docs.rs MCP server.

Records are written as one JSON object per line to a size-rotated file
named after the current date. Nothing goes to stdout, since the stdio
transport owns that stream.
"""

import datetime
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "DocsRsServer"
DEFAULT_LOGS_DIR = Path("./logs")
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class JsonFormatter(logging.Formatter):
    """Formats a record as a single JSON line with its source location and ``extra_data`` fields."""
    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "where": f"{record.module}:{record.funcName}:{record.lineno}",
            "message": record.getMessage(),
        }
        entry.update(getattr(record, 'extra_data', None) or {})
        if record.exc_info:
            entry['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


class JsonFileHandler(RotatingFileHandler):
    """Rotating ``{logs_dir}/{date}.log`` file that always writes JsonFormatter lines."""

    def __init__(self, logs_dir: Path):
        logs_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(
            logs_dir / f"{datetime.date.today()}.log",
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        self.setFormatter(JsonFormatter())


def find_file_handler(logger: logging.Logger) -> Optional[JsonFileHandler]:
    return next((h for h in logger.handlers if isinstance(h, JsonFileHandler)), None)


def setup_logging(logs_dir: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure the server's structured JSON logger.

    Every tool module calls this at import time. The JSON file handler is
    attached once; handlers installed by anything else (test capture, an
    embedding host) are left alone and do not count as configuration.

    Args:
        logs_dir: Directory to store log files. If None, uses "./logs"
        level: Minimum level to record

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    if find_file_handler(logger) is None:
        logger.addHandler(JsonFileHandler(logs_dir or DEFAULT_LOGS_DIR))
    return logger
