"""
Logging setup for the palette engine.
Supports plain or structured (JSON) console output and optional file rotation.
"""

import os
import sys
import time
import json
import logging
import traceback
from typing import Optional
from logging.handlers import RotatingFileHandler
from datetime import datetime
from functools import wraps

# Constants
DEFAULT_LOG_LEVEL = 'INFO'
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Attributes every LogRecord carries; anything else was passed through `extra`
_RECORD_ATTRIBUTES = frozenset((
    'args', 'asctime', 'created', 'exc_info', 'exc_text', 'filename',
    'funcName', 'id', 'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'msg', 'name', 'pathname', 'process', 'processName',
    'relativeCreated', 'stack_info', 'taskName', 'thread', 'threadName',
))


class JsonFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record):
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'name': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logger(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: bool = True,
    use_json: bool = False,
    format_str: Optional[str] = None
) -> None:
    """
    Configure the root logger for the application.

    Args:
        level: Logging level name; falls back to the LOG_LEVEL environment
            variable, then INFO
        log_file: Optional file to log to
        console: Whether to log to console
        use_json: Emit one JSON object per record instead of plain text
        format_str: Optional custom format string for plain text output
    """
    level = level or os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL)
    level_value = getattr(logging, level.upper(), logging.INFO)

    if use_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(format_str or LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_value)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(level_value)
        root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level_value)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class LogCapture:
    """Context manager to capture logs for testing or analysis."""

    def __init__(self, logger_name: str = None, level: int = logging.DEBUG):
        self.logger_name = logger_name
        self.level = level
        self.handler = None
        self.records = []
        self._previous_level = None

    @property
    def messages(self):
        return [record.getMessage() for record in self.records]

    def __enter__(self):
        records = self.records

        class CaptureHandler(logging.Handler):
            def emit(self, record):
                records.append(record)

        self.handler = CaptureHandler()
        self.handler.setLevel(self.level)

        logger = logging.getLogger(self.logger_name)
        self._previous_level = logger.level
        if logger.getEffectiveLevel() > self.level:
            logger.setLevel(self.level)
        logger.addHandler(self.handler)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.handler:
            logger = logging.getLogger(self.logger_name)
            logger.removeHandler(self.handler)
            logger.setLevel(self._previous_level)
            self.handler = None


def log_function_call(logger=None, level=logging.DEBUG):
    """
    Decorator to log function calls with their duration.

    Args:
        logger: Logger to use or None to use function's module logger
        level: Log level
    """
    def decorator(func):
        nonlocal logger
        if logger is None:
            logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            func_name = func.__qualname__
            if not logger.isEnabledFor(level):
                return func(*args, **kwargs)

            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                logger.exception(
                    f"{func_name} failed after {elapsed:.6f}s with {type(e).__name__}: {e}"
                )
                raise
            elapsed = time.perf_counter() - start_time
            logger.log(level, f"{func_name} completed in {elapsed:.6f}s")
            return result

        return wrapper
    return decorator
