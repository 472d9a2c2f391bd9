# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens in the calendar in a structured way,
# making it easy to see which templates loaded, which events changed and which reminders failed.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting, contextual session information and
# a cached logger wrapper that turns keyword arguments into structured fields.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Session context tracking

# 🔄 Connected Modules / Calls From:
# Used by: All calendar modules for consistent logging and error tracking, app.main at startup

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variable for calendar session tracking
session_id_var: ContextVar[str] = ContextVar('session_id', default='')

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}

SERVICE_NAME = 'crop-calendar'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter appending the session id and structured fields to the line.
    """

    def format(self, record):
        line = super().format(record)

        context = {}
        if session_id_var.get():
            context['session_id'] = session_id_var.get()
        context.update(getattr(record, 'extra_fields', None) or {})

        if context:
            line += ' | ' + ' '.join(f"{key}={value}" for key, value in context.items())
        return line


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('json_ensure_ascii', False)
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = SERVICE_NAME

        if session_id_var.get():
            log_record['session_id'] = session_id_var.get()

        # extra_fields is flattened into the payload
        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Keyword arguments passed to the log methods are attached to the
    record as structured fields instead of being formatted into the message.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self.logger.name

    def debug(self, message: str, extra: Dict = None, **kwargs):
        """Log debug message with extra fields."""
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        """Log info message with extra fields."""
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        """Log warning message with extra fields."""
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        """Log error message with extra fields."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None
    ):
        """Log calendar business events (event added, reminder scheduled...)."""
        extra_fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            **(extra or {})
        }

        if entity_id:
            extra_fields['entity_id'] = entity_id
        if entity_type:
            extra_fields['entity_type'] = entity_type

        self.info(description, extra=extra_fields)


def setup_logging(
    log_level: str = None,
    log_format: str = None,
    log_file: str = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Values not given explicitly are read from settings. Calling this
    more than once is a no-op.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('asyncio').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(session_id: Optional[str] = None):
    """
    Context manager binding a calendar session id to every log record.

    Args:
        session_id: Session identifier, generated when omitted
    """
    if session_id is None:
        session_id = str(uuid4())

    token = session_id_var.set(session_id)
    try:
        yield session_id
    finally:
        session_id_var.reset(token)


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )
