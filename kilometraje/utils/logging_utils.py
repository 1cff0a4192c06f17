"""Structured logging helpers: context fields, redaction, call tracing."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional, cast

_thread_local = threading.local()

# Keys whose values must never reach the logs
SENSITIVE_FIELDS = {
    "national_id",
    "dni",
    "nie",
    "password",
    "token",
    "secret",
}

REDACTED = "***REDACTED***"


class LogContext:
    """Context manager adding structured fields to every log record.

    Example:
        with LogContext(command="add"):
            logger.info("Submitting record")
            # record carries command="add"
    """

    def __init__(self, **kwargs):
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = self.previous_context or {}


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active in the current thread."""
    return dict(getattr(_thread_local, "context", {}))


class _ContextFilter(logging.Filter):
    """Logging filter copying LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def sanitize_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values in a (possibly nested) dictionary.

    Matching is case-insensitive on substrings of the key, so
    ``national_id`` and ``dniUsuario`` are both redacted. Empty values are
    left as they are.

    Example:
        >>> sanitize_sensitive_data({"name": "Ana", "national_id": "12345678Z"})
        {'name': 'Ana', 'national_id': '***REDACTED***'}
    """
    if not isinstance(data, dict):
        return data

    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_FIELDS):
            sanitized[key] = REDACTED if value else value
        elif isinstance(value, dict):
            sanitized[key] = sanitize_sensitive_data(cast(Dict[str, Any], value))
        else:
            sanitized[key] = value

    return sanitized


def log_function_call(
    func: Optional[Callable] = None, *, level: str = "DEBUG"
) -> Callable:
    """Decorator logging entry, exit and exceptions of a function.

    Works both as ``@log_function_call`` and
    ``@log_function_call(level="INFO")``.
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            logger.log(log_level, f"Entering {f.__name__}")
            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise
            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
