"""
Centralized logging configuration for the clinic records core.

This module provides structured logging with:
- JSON formatting for machine-readable output
- Console formatting for development
- Optional log rotation to files

Usage:
    from clinic.core.logging_config import setup_logging, get_logger

    # At startup
    setup_logging(log_level="INFO")

    # In any module
    logger = get_logger(__name__)
    logger.info("Patient added", extra={"context": {"patient_id": 1}})
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.
    Outputs logs as JSON with timestamp, level, message, and extra context.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "context"):
            log_data["context"] = getattr(record, "context", {})

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    Human-readable console formatter with colors for development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        return super().format(record)


def setup_logging(
    log_level: Union[int, str] = "INFO",
    log_to_file: bool = False,
    use_json_format: bool = False,
    log_dir: Union[str, Path] = "logs",
) -> None:
    """
    Configure logging for the clinic core.

    Args:
        log_level: Logging level (can be int like logging.INFO or string "INFO")
        log_to_file: Write logs to a rotating file
        use_json_format: Use JSON format instead of console format
        log_dir: Directory for log files when log_to_file is set
    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Close and remove existing handlers properly
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if use_json_format:
        console_formatter: logging.Formatter = JSONFormatter()
    else:
        console_formatter = ConsoleFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_path = Path(log_dir)
        try:
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "clinic.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files
            root_logger.addHandler(file_handler)
        except OSError as e:
            # Disk full, read-only directory and the like: stay on console
            root_logger.warning(
                f"Failed to create file handler in {log_path}: {e}. "
                "Falling back to console-only logging.",
                extra={"context": {"component": "logging_setup"}},
            )

    app_logger = logging.getLogger("clinic")
    app_logger.setLevel(level)
    app_logger.info(
        f"Logging configured: level={logging.getLevelName(level)}, "
        f"log_to_file={log_to_file}, json_format={use_json_format}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ of the module)

    Example:
        logger = get_logger(__name__)
        logger.info("Bill generated", extra={"context": {"bill_id": 3}})
    """
    return logging.getLogger(name)
