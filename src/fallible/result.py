"""Try type holding either a computed value or a captured fault.

A Try[T, E] is exactly one of:
- Success(value): the computation returned ``value``
- Failure(error): the computation raised (or returned) the fault ``error``

Both variants are frozen dataclasses and compare structurally. Exception
payloads in either variant match on exact type and args, since Python
exceptions otherwise compare by identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


def _payload_key(payload: Any) -> Any:
    if isinstance(payload, BaseException):
        return (type(payload), payload.args)
    return payload


def _same_payload(left: Any, right: Any) -> bool:
    """Compare payloads; exceptions match on exact type and args."""
    if left is right:
        return True
    if isinstance(left, BaseException) or isinstance(right, BaseException):
        return _payload_key(left) == _payload_key(right)
    return bool(left == right)


@dataclass(frozen=True, slots=True, eq=False)
class Success(Generic[T]):
    """Successful outcome containing a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Success):
            return NotImplemented
        return _same_payload(self.value, other.value)

    def __hash__(self) -> int:
        return hash((Success, _payload_key(self.value)))


@dataclass(frozen=True, slots=True, eq=False)
class Failure(Generic[E]):
    """Failed outcome containing the captured fault."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Failure: {self.error!r}")

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return _same_payload(self.error, other.error)

    def __hash__(self) -> int:
        return hash((Failure, _payload_key(self.error)))


Try = Union[Success[T], Failure[E]]


def success(value: T) -> Success[T]:
    """Construct a Success holding ``value``."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Construct a Failure holding ``error``."""
    return Failure(error)


def is_success(x: object) -> bool:
    return isinstance(x, Success)


def is_failure(x: object) -> bool:
    return isinstance(x, Failure)


def is_try(x: object) -> bool:
    return isinstance(x, (Success, Failure))


def from_success(s: Success[T]) -> T:
    """Return the value of a Success.

    Raises:
        ValueError: ``s`` is not a Success. Check the variant first.
    """
    if not isinstance(s, Success):
        raise ValueError(f"from_success called on {s!r}")
    return s.value


def from_failure(f: Failure[E]) -> E:
    """Return the error of a Failure.

    Raises:
        ValueError: ``f`` is not a Failure. Check the variant first.
    """
    if not isinstance(f, Failure):
        raise ValueError(f"from_failure called on {f!r}")
    return f.error


def from_try(x: object) -> Optional[Any]:
    """Return the payload of either variant, or None for a non-Try."""
    if isinstance(x, Success):
        return x.value
    if isinstance(x, Failure):
        return x.error
    return None
