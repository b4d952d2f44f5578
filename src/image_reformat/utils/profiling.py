"""Stage timing for the reformat pipeline."""

import inspect
import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar, cast

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def timed_stage(stage: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator logging how long a pipeline stage took, at DEBUG level.

    Works for plain and ``async`` functions. The time is logged whether the
    stage returns or raises.

    Usage:
        @timed_stage("acquire")
        async def acquire(locator):
            ...
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        def log_elapsed(start_time: float) -> None:
            elapsed_time = time.perf_counter() - start_time
            logger.debug(f"[STAGE] {stage} ({func.__qualname__}) took {elapsed_time:.3f}s")

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> object:
                start_time = time.perf_counter()
                try:
                    return await cast(Callable[P, Awaitable[object]], func)(*args, **kwargs)
                finally:
                    log_elapsed(start_time)

            return cast(Callable[P, R], async_wrapper)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                log_elapsed(start_time)

        return wrapper

    return decorator
