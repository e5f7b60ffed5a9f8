from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from duration_formatter.logging_config import logger

F = TypeVar("F", bound=Callable[..., Any])


def log_sync_call(func: F) -> F:
    """Log entry, exit and failures of a synchronous call."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        name = func.__qualname__
        logger.debug("-> %s args=%s kwargs=%s", name, args, kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception:
            logger.exception("%s failed", name)
            raise
        logger.debug("<- %s result=%r", name, result)
        return result

    return wrapper  # type: ignore[return-value]
