"""
Structured logging for mission-analyzer

All diagnostics go to stderr so that JSON/CSV payloads on stdout stay
parseable. Three formats are available: a terse "text" format for the
command line, a "detailed" format for local debugging, and "json" built
on python-json-logger for machine consumption.
"""
import logging
import os
import sys
import time
from typing import IO

from pythonjsonlogger import jsonlogger

APP_LOGGER = "mission_analyzer"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

FORMAT_TYPES = ("text", "detailed", "json")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that adds timestamp, level, logger, module and function
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        if log_record.get("level"):
            log_record["level"] = log_record["level"].upper()
        else:
            log_record["level"] = record.levelname

        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    if format_type == "detailed":
        return logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    return logging.Formatter(fmt="%(levelname)s: %(message)s")


def setup_logger(
    name: str = APP_LOGGER,
    level: str | None = None,
    format_type: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "text", "detailed" or "json"
        stream: Output stream (defaults to the current sys.stderr)

    Returns:
        Configured logger instance
    """
    log_level_str = level or os.getenv("LOG_LEVEL", "WARNING")
    log_level = LOG_LEVELS.get(log_level_str.upper(), logging.WARNING)

    format_type = (format_type or os.getenv("LOG_FORMAT", "text")).lower()
    if format_type not in FORMAT_TYPES:
        raise ValueError(f"Unsupported log format: {format_type}")

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def get_logger(name: str = APP_LOGGER) -> logging.Logger:
    """
    Get a logger instance

    Module loggers are children of the package logger; the package logger
    is configured on first use if nobody configured it yet.

    Args:
        name: Logger name, usually __name__

    Returns:
        Logger instance
    """
    app_logger = logging.getLogger(APP_LOGGER)
    if not app_logger.handlers:
        setup_logger(APP_LOGGER)

    return logging.getLogger(name)


class log_operation:
    """
    Context manager for logging operation duration

    Usage:
        with log_operation("Analyzing log", logger=logger, source="missions.log"):
            # do work
            pass

    failure_level lowers the failure record when the caller reports the
    exception itself.
    """

    def __init__(
        self,
        operation_name: str,
        logger: logging.Logger | None = None,
        failure_level: int = logging.ERROR,
        **extra_fields,
    ):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.failure_level = failure_level
        self.extra_fields = extra_fields
        self.start_time: float | None = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(
            f"Starting: {self.operation_name}",
            extra={"operation": self.operation_name, **self.extra_fields}
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"Completed: {self.operation_name} in {duration:.3f}s",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "success",
                    **self.extra_fields
                }
            )
        else:
            self.logger.log(
                self.failure_level,
                f"Failed: {self.operation_name}",
                extra={
                    "operation": self.operation_name,
                    "duration_seconds": round(duration, 3),
                    "status": "error",
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **self.extra_fields
                },
            )
        return False  # Don't suppress exceptions
