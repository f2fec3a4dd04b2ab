"""
Enhanced Logging Utilities

Provides structured logging with contextual information for API debugging.
Implements hybrid approach: human-readable console + structured JSON files.
"""
import contextvars
import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional, Union

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

JSONValue = Union[
    str,
    int,
    float,
    bool,
    None,
    dict[str, Any],   # nested object
    list[Any]         # arrays
]

CONSOLE_HANDLER_NAME = "glo-console"
JSON_HANDLER_NAME = "glo-json"

# Standard LogRecord attributes that never belong in the 'extra' block
_RECORD_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
    # Set on the record by other formatters sharing the handler chain
    'message', 'asctime'
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the caller-supplied extras of a record, stringifying non-JSON values."""
    extra_data = {}
    for key, value in record.__dict__.items():
        if key in _RECORD_ATTRS:
            continue
        try:
            json.dumps(value)
            extra_data[key] = value
        except (TypeError, ValueError):
            extra_data[key] = str(value)
    return extra_data


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured file logging."""

    def format(self, record) -> str:
        """Format log record as JSON with context information."""
        log_obj: dict[str, JSONValue] = {
            'timestamp': datetime.now().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if record.funcName:
            log_obj['function'] = record.funcName
        if record.lineno:
            log_obj['line'] = record.lineno

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else 'Unknown',
                'message': str(record.exc_info[1]) if record.exc_info[1] else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get()
        if context:
            log_obj['context'] = context.copy()

            # Promote trace_id to standard key if available in context
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra_data = _extra_fields(record)
        if extra_data:
            log_obj['extra'] = extra_data

        return json.dumps(log_obj, ensure_ascii=False) + '\n'


class ContextualLogger:
    """
    Logger wrapper that forwards keyword arguments as structured extras.

    Holds no per-call state, so one instance can be shared by concurrent tasks.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """
        Log error message with context and exception information.

        Args:
            message: Error message
            error: Optional exception object
            **kwargs: Additional context
        """
        if error:
            kwargs['error'] = {
                'type': type(error).__name__,
                'message': str(error)
            }
            self.logger.error(message, exc_info=True, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback and context."""
        self.logger.exception(message, extra=kwargs)


def set_log_context(**context):
    """
    Add key/value pairs to the logging context of the current task.

    Args:
        **context: Values to include in every JSON log line (e.g. board_id, trace_id)
    """
    current = log_context.get().copy()
    current.update({key: str(value) for key, value in context.items() if value is not None})
    log_context.set(current)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """
    Get a contextual logger instance.

    Args:
        logger_name: Name for the logger (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logger_name)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure hybrid logging: human-readable console + optional structured JSON file.

    Applications call this once; importing the client never touches logging setup.

    Args:
        level: Log level name (defaults to GLO_LOG_LEVEL)
        log_file: Path of a rotating JSON log file; console only when omitted

    Returns:
        The configured root logger
    """
    from config import get_config

    level_name = (level or get_config().log_level).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name))

    # Avoid duplicate handlers on repeated setup
    if any(handler.get_name() == CONSOLE_HANDLER_NAME for handler in root_logger.handlers):
        return root_logger

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    ))
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        json_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5
        )
        json_handler.set_name(JSON_HANDLER_NAME)
        json_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(json_handler)

    return root_logger
