"""
Logging utilities for drivekit
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    GRAY = '\033[37m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def _logger_has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h, logging.FileHandler) for h in logger.handlers)


class DriveFormatter(logging.Formatter):
    LEVEL_COLORS = {
        'DEBUG': Colors.GRAY,
        'INFO': Colors.GREEN,
        'WARNING': Colors.YELLOW,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.RED + Colors.BOLD,
    }

    def __init__(self, logger: logging.Logger):
        super().__init__()
        self.logger = logger

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S'
        )
        level = record.levelname
        message = record.getMessage()

        use_colors = (
                sys.stdout.isatty()
                and not _logger_has_file_handler(self.logger)
        )

        if use_colors:
            color = self.LEVEL_COLORS.get(level, '')
            return (
                f"{Colors.GRAY}[{timestamp}]{Colors.RESET} "
                f"{color}[{level}]{Colors.RESET} {message}"
            )
        return f"[{timestamp}] [{level}] {message}"


class DriveJSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        for field in ("path", "bytes_written"):
            if hasattr(record, field):
                data[field] = getattr(record, field)

        return json.dumps(data)


LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
}


def setup_logging(
        log_level: str = "info",
        log_file_path: Optional[str] = None,
        log_to_console: bool = True,
        log_type: str = "plain",
) -> logging.Logger:

    level = LEVEL_MAP.get(log_level.lower(), logging.INFO)

    logger = logging.getLogger("drivekit")
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    if log_to_console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(level)
        ch.setFormatter(DriveFormatter(logger))
        logger.addHandler(ch)

    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file_path, mode="a")
        fh.setLevel(level)

        if log_type == "json":
            fh.setFormatter(DriveJSONFormatter())
        else:
            fh.setFormatter(DriveFormatter(logger))

        logger.addHandler(fh)

    return logger
