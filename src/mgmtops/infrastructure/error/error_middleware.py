"""Error handling middleware for the command handlers."""

import functools
from typing import Callable, Optional

from mgmtops.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler


def with_error_handling(context: str, error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding error handling to command handlers.

    The wrapped handler returns an error dictionary instead of raising; the
    dictionary carries an "error" key so callers can tell it apart.

    Args:
        context: Operation name recorded with the error
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            handler = error_handler or get_exception_handler()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return handler.handle_error(e, context=context).to_dict()

        return wrapper

    return decorator


def is_error_response(result) -> bool:
    return isinstance(result, dict) and "error" in result and "category" in result
