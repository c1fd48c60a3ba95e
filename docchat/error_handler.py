"""Error handling helpers shared by the clients, use cases and entry points."""

import logging
import traceback
from functools import wraps
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Type

from .exceptions import DocChatError, ConfigurationError

logger = logging.getLogger(__name__)


def _log_extra(error: Exception, details: Optional[dict]) -> Dict[str, Any]:
    if isinstance(error, DocChatError):
        return {
            'error_code': error.error_code,
            'details': {**(error.details or {}), **(details or {})},
        }
    return {
        'original_error': str(error),
        'details': details or {},
        'traceback': traceback.format_exc(),
    }


def log_error(
    error: Exception,
    context: str,
    details: Optional[dict] = None,
    level: int = logging.ERROR
) -> None:
    """Log ``error`` under ``context``; DocChatError details are merged into ``details``."""
    message = error.message if isinstance(error, DocChatError) else str(error)
    extra = _log_extra(error, details)
    extra['context'] = context
    logger.log(level, f"{context}: {message}", extra=extra)


def handle_errors(
    default_return: Any = None,
    exception_type: Type[DocChatError] = DocChatError,
    log_level: int = logging.ERROR,
    reraise: bool = False
):
    """Log failures of the wrapped call.

    With ``reraise`` our own errors pass through unchanged and anything else is
    wrapped in ``exception_type``; without it ``default_return`` is returned.
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DocChatError as e:
                log_error(e, f"{func.__name__} failed", level=log_level)
                if reraise:
                    raise
            except Exception as e:
                log_error(e, f"Unexpected error in {func.__name__}", level=log_level)
                if reraise:
                    raise exception_type(
                        message=f"Unexpected error in {func.__name__}: {e}",
                        details={'original_error': str(e), 'function': func.__name__}
                    ) from e
            return default_return
        return wrapper
    return decorator


def validate_config(config: Mapping[str, Any], required_keys: Iterable[str], context: str = "Configuration") -> None:
    """Raise ConfigurationError naming every required key that is unset or empty."""
    missing = [key for key in required_keys if not config.get(key)]
    if missing:
        raise ConfigurationError(
            message=f"{context}: missing required configuration keys: {', '.join(missing)}",
            details={'missing_keys': missing, 'context': context}
        )
