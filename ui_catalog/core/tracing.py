"""
Operation Tracing
Timed log events around catalog operations; slow or failing calls surface
at warning/error level, everything else stays at debug.
"""

import functools
import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from .logging_config import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

SLOW_OPERATION_SECONDS = 1.0


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


@contextmanager
def trace_operation(operation: str, slow_after: float = SLOW_OPERATION_SECONDS, **fields: Any) -> Iterator[None]:
    """
    Log the start, end and duration of ``operation``.

    Args:
        operation: Event-friendly operation name
        slow_after: Seconds after which a successful call is reported as slow
        **fields: Extra context attached to every event
    """
    start = time.perf_counter()
    logger.debug("operation_start", operation=operation, **fields)
    try:
        yield
    except Exception as e:
        logger.error(
            "operation_error",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
            duration_ms=_elapsed_ms(start),
            **fields,
        )
        raise

    duration_ms = _elapsed_ms(start)
    if duration_ms > slow_after * 1000:
        logger.warning("operation_slow", operation=operation, duration_ms=duration_ms, **fields)
    else:
        logger.debug("operation_end", operation=operation, duration_ms=duration_ms, **fields)


def trace_function(func: F) -> F:
    """Decorator tracing every call of ``func`` under its qualified name."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with trace_operation(func.__qualname__):
            return func(*args, **kwargs)

    return wrapper  # type: ignore
