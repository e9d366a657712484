"""
Logging configuration for structured text logging.
"""
import logging
import sys
from typing import Dict
from wordcheck.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured text logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured key-value pairs."""
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        base_msg = f"{timestamp}.{int(record.msecs):03d} | {record.levelname:8} | {record.name} | {record.getMessage()}"

        # Anything not set by LogRecord itself came in through `extra`
        extra_fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in StructuredLogger.RESERVED_FIELDS
        }

        if extra_fields:
            base_msg += " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)

        return base_msg


def setup_logging() -> logging.Logger:
    """
    Configure and return the package logger.

    Supports per-module log level configuration via environment variables:
    - APP_LOG_LEVEL: wordcheck logs (default: LOG_LEVEL)
    - UVICORN_LOG_LEVEL: Uvicorn logs (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("wordcheck")
    app_log_level = (settings.APP_LOG_LEVEL or settings.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, app_log_level))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, app_log_level))
    console_handler.setFormatter(StructuredFormatter())

    logger.addHandler(console_handler)
    logger.propagate = False

    _configure_third_party_loggers()

    return logger


def _configure_third_party_loggers() -> Dict[str, str]:
    """
    Configure log levels for third-party libraries.

    Returns:
        Dictionary mapping logger names to configured levels
    """
    config = {}

    uvicorn_level = (settings.UVICORN_LOG_LEVEL or "INFO").upper()
    logging.getLogger("uvicorn").setLevel(getattr(logging, uvicorn_level))
    logging.getLogger("uvicorn.access").setLevel(getattr(logging, uvicorn_level))
    config["uvicorn"] = uvicorn_level

    return config


class StructuredLogger:
    """Wrapper around logging.Logger that supports keyword arguments for structured logging."""

    # Reserved field names in LogRecord that should be prefixed
    RESERVED_FIELDS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'taskName'
    }

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _log(self, level: int, msg: str, *args, **kwargs):
        """Log with structured extra fields."""
        exc_info = kwargs.pop('exc_info', False)

        extra = {}
        for key, value in kwargs.items():
            if key in self.RESERVED_FIELDS:
                extra[f'ctx_{key}'] = value
            else:
                extra[key] = value

        self._logger.log(level, msg, *args, extra=extra, exc_info=exc_info, stacklevel=3)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, msg, *args, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger with the specified name under the wordcheck namespace.

    Args:
        name: Logger name (will be prefixed with 'wordcheck.')

    Returns:
        StructuredLogger instance
    """
    logger = logging.getLogger(f"wordcheck.{name}")
    return StructuredLogger(logger)


# Initialize package logger
app_logger = setup_logging()
