"""
Utility decorators for Practice Review
"""

import time
import logging
import functools
from typing import Any, Callable

logger = logging.getLogger(__name__)


def timed(func: Callable) -> Callable:
    """
    Log execution time of a function at DEBUG level.

    Usage:
        @timed
        def fetch_all(self):
            ...

    Logs: "fetch_all took 1002.3ms"
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.debug(f"{func.__name__} took {elapsed_ms:.1f}ms")
    return wrapper


__all__ = ['timed']
