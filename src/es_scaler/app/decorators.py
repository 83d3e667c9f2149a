"""
Decorators - Call logging and timing for scaler methods.

Both decorators log through the instance's injected logger (the `_logger`
attribute of the bound object). Plain functions, or objects without one,
fall back to a StandardLogger named after the function's module.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from ..infrastructure.logger import StandardLogger
from ..interfaces import ScalerLogger

T = TypeVar("T")


def _logger_for(func: Callable[..., Any], args: tuple[Any, ...]) -> ScalerLogger:
    if args:
        injected = getattr(args[0], "_logger", None)
        if injected is not None:
            return injected
    return StandardLogger(func.__module__)


def log_call(log_result: bool = True) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Log entry, result and failure of a method.

    Usage:
        @log_call()
        def is_active(self) -> bool:
            ...

    Args:
        log_result: Also log the returned value
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            logger = _logger_for(func, args)
            logger.debug(f"Call: {func.__name__}")
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Exception in {func.__name__}: {e}")
                raise
            if log_result:
                logger.debug(f"Return: {func.__name__} -> {result}")
            return result

        return cast("Callable[..., T]", wrapper)

    return decorator


def timed(metric_name: str | None = None) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Log how long a call took, whether it returned or raised.

    Args:
        metric_name: Name used in the log line (default: execution_time.<function>)
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        label = metric_name or f"execution_time.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start
                _logger_for(func, args).debug(f"{label}: {elapsed:.3f}s")

        return cast("Callable[..., T]", wrapper)

    return decorator


__all__ = [
    "log_call",
    "timed",
]
