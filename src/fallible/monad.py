"""Functor, Applicative and Monad operations for Try.

The capability contracts are plain protocols; ``TryMonad`` implements all
three for Try and ``context`` is its shared instance. Generic helpers such
as ``sequence`` take the instance as an explicit ``monad`` argument.

Note the asymmetry between the two families:
- ``fmap``/``fapply`` run the transformation through ``run_captured``, so a
  raising function yields a Failure
- ``bind`` returns the callback's Try as-is; a raising callback propagates
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Iterable, Optional, Protocol, TypeVar

from src.fallible.capture import run_captured
from src.fallible.config import TryConfig
from src.fallible.result import Failure, Success, Try, is_try

T = TypeVar("T")
U = TypeVar("U")


class Functor(Protocol):
    def fmap(self, fn: Callable[[Any], Any], mv: Any) -> Any: ...


class Applicative(Functor, Protocol):
    def pure(self, value: Any) -> Any: ...

    def fapply(self, mf: Any, mv: Any) -> Any: ...


class Monad(Applicative, Protocol):
    def mreturn(self, value: Any) -> Any: ...

    def mbind(self, mv: Any, fn: Callable[[Any], Any]) -> Any: ...


def _ensure_try(value: object, operation: str) -> None:
    if not is_try(value):
        raise TypeError(f"{operation} expects a Success or Failure, got {value!r}")


class TryMonad:
    """Functor, Applicative and Monad instance for Try.

    ``config`` controls fault capture in ``fmap`` and ``fapply``; None means
    the environment configuration.
    """

    def __init__(self, config: Optional[TryConfig] = None) -> None:
        self._config = config

    def fmap(self, fn: Callable[[T], U], mv: Try[T, Any]) -> Try[U, Any]:
        _ensure_try(mv, "fmap")
        if isinstance(mv, Failure):
            return mv
        return run_captured(partial(fn, mv.value), self._config)

    def pure(self, value: T) -> Success[T]:
        return Success(value)

    def fapply(
        self, mf: Try[Callable[[T], U], Any], mv: Try[T, Any]
    ) -> Try[U, Any]:
        _ensure_try(mf, "fapply")
        if isinstance(mf, Failure):
            return mf
        return self.fmap(mf.value, mv)

    def mreturn(self, value: T) -> Success[T]:
        return Success(value)

    def mbind(
        self, mv: Try[T, Any], fn: Callable[[T], Try[U, Any]]
    ) -> Try[U, Any]:
        _ensure_try(mv, "bind")
        if isinstance(mv, Failure):
            return mv
        return fn(mv.value)

    def __repr__(self) -> str:
        return f"<TryMonad config={self._config!r}>"


context = TryMonad()


def fmap(fn: Callable[[T], U], t: Try[T, Any]) -> Try[U, Any]:
    """Apply ``fn`` to a Success value, capturing faults; pass a Failure through."""
    return context.fmap(fn, t)


def pure(value: T) -> Success[T]:
    return context.pure(value)


def fapply(tf: Try[Callable[[T], U], Any], ta: Try[T, Any]) -> Try[U, Any]:
    """Apply a Success-wrapped function to ``ta``.

    A Failure in the function slot is returned without looking at ``ta``.
    """
    return context.fapply(tf, ta)


def return_(value: T) -> Success[T]:
    return context.mreturn(value)


def bind(t: Try[T, Any], fn: Callable[[T], Try[U, Any]]) -> Try[U, Any]:
    """Feed a Success value to ``fn`` and return its Try unchanged.

    ``fn`` is not fault-captured: an exception it raises reaches the caller.
    A Failure is returned without calling ``fn``.
    """
    return context.mbind(t, fn)


def sequence(values: Iterable[Any], monad: Monad = context) -> Any:
    """Collect monadic values into one monadic list.

    For Try this yields Success([...]) when every value succeeds, else the
    first Failure; later values are not inspected.
    """
    out: list[Any] = []
    for mv in values:
        step = monad.fmap(out.append, mv)
        if isinstance(step, Failure):
            return step
    return monad.mreturn(out)


def traverse(
    fn: Callable[[Any], Any], items: Iterable[Any], monad: Monad = context
) -> Any:
    """Map ``fn`` over ``items`` and sequence the results lazily."""
    return sequence((fn(item) for item in items), monad)


def chain(mv: Any, *fns: Callable[[Any], Any], monad: Monad = context) -> Any:
    """Bind ``fns`` left to right starting from ``mv``."""
    for fn in fns:
        mv = monad.mbind(mv, fn)
    return mv
