"""Run computations and capture their faults as Try values.

APIs signal failure either by raising or by returning an error object.
``run_captured`` accepts both conventions and always produces a Try:

    run_captured(lambda: int("42"))     # Success(42)
    run_captured(lambda: int("abc"))    # Failure(ValueError(...))
    run_captured(lambda: KeyError("k")) # Failure(KeyError('k'))
"""

from __future__ import annotations

import logging
from functools import partial, wraps
from typing import Any, Callable, Optional, TypeVar

from src.fallible.config import TryConfig, default_config
from src.fallible.result import Failure, Success, Try

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _fault_types(config: TryConfig) -> tuple[type[BaseException], ...]:
    if config.catch_base_exceptions:
        return (BaseException,)
    return (Exception,)


def _describe(fn: Callable[..., Any]) -> str:
    if isinstance(fn, partial):
        fn = fn.func
    return getattr(fn, "__qualname__", None) or repr(fn)


def is_fault(value: object, config: Optional[TryConfig] = None) -> bool:
    """Return True if ``value`` is an exception object the config treats as a fault."""
    config = config or default_config()
    return isinstance(value, _fault_types(config))


def run_captured(
    fn: Callable[[], T], config: Optional[TryConfig] = None
) -> Try[T, BaseException]:
    """Call ``fn`` once and return its outcome as a Try.

    Args:
        fn: Zero-argument computation.
        config: Capture settings; defaults to the environment configuration.

    Returns:
        Failure with the raised exception, Failure with a returned
        fault-shaped value, or Success with the returned value.
    """
    config = config or default_config()
    try:
        value = fn()
    except _fault_types(config) as exc:
        if config.log_captured_faults:
            logger.debug(
                "Captured raised %s from %s", type(exc).__name__, _describe(fn)
            )
        return Failure(exc)

    if config.capture_returned_faults and is_fault(value, config):
        if config.log_captured_faults:
            logger.debug(
                "Captured returned %s from %s", type(value).__name__, _describe(fn)
            )
        return Failure(value)  # type: ignore[arg-type]

    return Success(value)


def run_or_else(
    fn: Callable[[], T], default: T, config: Optional[TryConfig] = None
) -> Try[T, BaseException]:
    """Run ``fn``; replace a Failure with Success(default).

    ``default`` is used as given, even if it is itself fault-shaped.
    """
    result = run_captured(fn, config)
    if isinstance(result, Failure):
        return Success(default)
    return result


def run_or_recover(
    fn: Callable[[], T],
    recover: Callable[[BaseException], Try[Any, Any]],
    config: Optional[TryConfig] = None,
) -> Try[Any, Any]:
    """Run ``fn``; on Failure return ``recover(error)``.

    ``recover`` must return a Try itself. Its result is returned as-is and
    anything it raises propagates to the caller.
    """
    result = run_captured(fn, config)
    if isinstance(result, Failure):
        return recover(result.error)
    return result


def wrap(
    fn: Callable[..., R], config: Optional[TryConfig] = None
) -> Callable[..., Try[R, BaseException]]:
    """Lift ``fn`` so every call returns a Try instead of raising.

    Usable as a decorator:

        @wrap
        def divide(a, b):
            return a / b

        divide(10, 0)  # Failure(ZeroDivisionError(...))
    """

    @wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Try[R, BaseException]:
        return run_captured(partial(fn, *args, **kwargs), config)

    return wrapper
