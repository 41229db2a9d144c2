"""Custom decorators for datelayout.

This module provides decorator utilities for the library:
    - @memoize: Memoization for pure functions of hashable arguments

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import threading
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Memoization decorator for pure functions with hashable arguments.

    Results are cached by positional and keyword arguments. Exceptions
    are not cached, so a call that raises is retried the next time.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def interpret(template: str) -> tuple[str, ...]:
        ...     return tuple(template.split("/"))
    """
    cache: dict[tuple, T] = {}
    lock = threading.Lock()

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        with lock:
            if key in cache:
                return cache[key]
        result = func(*args, **kwargs)
        with lock:
            cache.setdefault(key, result)
        return result

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = ["memoize"]
