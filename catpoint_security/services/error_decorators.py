"""Decorators shared by the security services."""

import functools
import logging
import time
from typing import Optional

from ..logging_config import get_logger


def log_execution_time(logger_name: Optional[str] = None, level: int = logging.DEBUG):
    """Decorator to log function execution time.

    Args:
        logger_name: Optional component logger name to use
        level: Logging level for the message

    Returns:
        Decorated function that logs execution time, including when it raises
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = get_logger(logger_name or func.__module__.rsplit(".", 1)[-1])
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                execution_time = time.perf_counter() - start_time
                log.log(level, f"Function {func.__name__} executed in {execution_time:.4f} seconds")
        return wrapper
    return decorator
