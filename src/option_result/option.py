"""Option type for values that may be absent.

Provides a Rust-inspired Option[T] container with ``Some`` and ``Nothing``
states. Presence is tracked by an explicit tag, so falsy values such as ``0``,
``""`` or ``False`` are ordinary present values. ``None`` is the absent-marker
and is never stored.

An Option is a mutable cell: ``take``, ``replace``, ``get_or_insert`` and
``get_or_insert_with`` change the receiver in place. Every other operation
leaves the receiver alone and returns either the receiver or a new Option.

Usage:
    name = Option.from_value(os.environ.get("USER"))
    greeting = name.map(str.title).unwrap_or("stranger")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar

from option_result.errors import InvalidArgument, TypeMismatch, UnwrapError, describe_type
from option_result.result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class OptionTag(str, Enum):
    """Discriminant of an Option."""

    SOME = "some"
    NONE = "none"


def _invalid(message: str) -> InvalidArgument:
    logger.debug("Option contract violation: %s", message)
    return InvalidArgument(message)


def _mismatch(message: str) -> TypeMismatch:
    logger.debug("Option contract violation: %s", message)
    return TypeMismatch(message)


def _expect_option(value: object, what: str) -> Option[Any]:
    if not isinstance(value, Option):
        raise _mismatch(f"Expected {what} an Option, received {describe_type(value)}")
    return value


@dataclass(slots=True, init=False, repr=False)
class Option(Generic[T]):
    """A value of type T that is either present (``Some``) or absent (``Nothing``).

    Build instances with ``Some``, ``Nothing``, ``Option.from_value`` or
    ``Option.default``; calling ``Option(...)`` directly raises ``TypeMismatch``.
    """

    _tag: OptionTag
    _value: Any

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise _mismatch("Option cannot be instantiated directly; use Some() or Nothing()")

    @classmethod
    def _build(cls, tag: OptionTag, value: Any = None) -> Option[Any]:
        option = object.__new__(cls)
        option._tag = tag
        option._value = value
        return option

    def _set(self, value: Any) -> None:
        self._tag = OptionTag.SOME
        self._value = value

    def _clear(self) -> None:
        self._tag = OptionTag.NONE
        self._value = None

    # -- Static constructors -------------------------------------------------

    @staticmethod
    def default() -> Option[Any]:
        """Return ``Nothing``."""
        return Nothing()

    @staticmethod
    def from_value(value: Any) -> Option[Any]:
        """``None`` becomes ``Nothing``; anything else becomes ``Some(value)``."""
        if value is None:
            return Nothing()
        return Some(value)

    # -- Query ---------------------------------------------------------------

    @property
    def tag(self) -> OptionTag:
        return self._tag

    def is_some(self) -> bool:
        return self._tag is OptionTag.SOME

    def is_none(self) -> bool:
        return self._tag is OptionTag.NONE

    is_present = is_some
    is_absent = is_none

    # -- Extraction ----------------------------------------------------------

    def expect(self, message: str) -> T:
        """Return the contained value or raise ``UnwrapError(message)``."""
        if self.is_some():
            return self._value
        raise UnwrapError(message)

    def unwrap(self) -> T:
        """Return the contained value.

        Prefer ``unwrap_or``/``unwrap_or_else`` or an explicit ``is_some``
        check; this raises ``UnwrapError`` on ``Nothing``.
        """
        if self.is_some():
            return self._value
        raise UnwrapError("called `Option.unwrap()` on a `Nothing` value")

    def unwrap_or(self, fallback: T) -> T:
        if self.is_some():
            return self._value
        return fallback

    def unwrap_or_else(self, compute: Callable[[], T]) -> T:
        if self.is_some():
            return self._value
        return compute()

    # -- Transform -----------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        """Apply ``fn`` to a contained value and wrap the result with ``Some``.

        The result goes through the ``Some`` constructor, so a callback that
        returns an Option is flattened and a callback that returns ``None``
        gives ``Nothing``.
        """
        if self.is_some():
            return Option.from_value(fn(self._value))
        return self  # type: ignore[return-value]

    def map_or(self, fallback: U, fn: Callable[[T], U]) -> U:
        """``fn(value)`` when present, ``fallback`` otherwise. Neither is wrapped."""
        if self.is_some():
            return fn(self._value)
        return fallback

    def map_or_else(self, compute_fallback: Callable[[], U], fn: Callable[[T], U]) -> U:
        if self.is_some():
            return fn(self._value)
        return compute_fallback()

    def ok_or(self, error: E) -> Result[T, E]:
        """Map ``Some(v)`` to ``Ok(v)`` and ``Nothing`` to ``Err(error)``."""
        if self.is_some():
            return Ok(self._value)
        return Err(error)

    def ok_or_else(self, compute_error: Callable[[], E]) -> Result[T, E]:
        if self.is_some():
            return Ok(self._value)
        return Err(compute_error())

    # -- Boolean combinators -------------------------------------------------

    def and_(self, rhs: Option[U]) -> Option[U]:
        """``rhs`` when present, the receiver (``Nothing``) otherwise."""
        _expect_option(rhs, "`rhs` to be")
        if self.is_some():
            return rhs
        return self  # type: ignore[return-value]

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning callback onto a contained value."""
        if self.is_some():
            return _expect_option(fn(self._value), "`fn` to return")
        return self  # type: ignore[return-value]

    flat_map = and_then

    def or_(self, alt: Option[T]) -> Option[T]:
        _expect_option(alt, "`alt` to be")
        if self.is_some():
            return self
        return alt

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        if self.is_some():
            return self
        return _expect_option(fn(), "`fn` to return")

    def xor(self, alt: Option[T]) -> Option[T]:
        """The present side when exactly one of the two is present, else ``Nothing``."""
        _expect_option(alt, "`alt` to be")
        if self.is_some() and alt.is_none():
            return self
        if self.is_none() and alt.is_some():
            return alt
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if self.is_none():
            return self
        keep = predicate(self._value)
        if not isinstance(keep, bool):
            raise _mismatch(
                f"Expected `predicate` to return bool, received {describe_type(keep)}"
            )
        if keep:
            return self
        return Nothing()

    # -- Mutating operations -------------------------------------------------

    def get_or_insert(self, value: T) -> T:
        """Store ``value`` if empty, then return the contained value."""
        if value is None:
            raise _invalid("Expected `value` not to be None")
        if self.is_none():
            self._set(value)
        return self._value

    def get_or_insert_with(self, compute: Callable[[], T | Option[T]]) -> T:
        """Store the result of ``compute()`` if empty, then return the contained value.

        ``compute`` may return a bare value or a ``Some``; ``None`` and
        ``Nothing`` are rejected.
        """
        if self.is_none():
            computed = compute()
            if isinstance(computed, Option):
                if computed.is_none():
                    raise _invalid("Expected value computed from `compute` to be Some, got Nothing")
                computed = computed._value
            elif computed is None:
                raise _invalid("Expected value computed from `compute` not to be None")
            self._set(computed)
        return self._value

    def take(self) -> Option[T]:
        """Move the value out, leaving ``Nothing`` in the receiver."""
        if self.is_none():
            return self
        taken = self._value
        self._clear()
        return Some(taken)

    def replace(self, value: T) -> Option[T]:
        """Store ``value`` and return the previous contents as an Option."""
        if value is None:
            raise _invalid("Expected `value` not to be None")
        previous = Some(self._value) if self.is_some() else Nothing()
        self._set(value)
        return previous

    # -- Interop -------------------------------------------------------------

    def transpose(self) -> Result[Option[Any], Any]:
        """Turn an Option of a Result into a Result of an Option.

        ``Nothing`` maps to ``Ok(Nothing)``; ``Some(Ok(v))`` and
        ``Some(Err(e))`` map to ``Ok(Some(v))`` and ``Err(e)``.
        """
        if self.is_none():
            return Ok(Nothing())
        inner = self._value
        if not isinstance(inner, Result):
            raise _mismatch(
                f"Expected contained value to be a Result, received {describe_type(inner)}"
            )
        if inner.is_ok():
            return Ok(Option.from_value(inner.unwrap()))
        return Err(inner.unwrap_err())

    def iter(self) -> Iterator[T]:
        return iter(self)

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self._value

    def __repr__(self) -> str:
        if self.is_some():
            return f"Some({self._value!r})"
        return "Nothing"


def Some(value: T | Option[T]) -> Option[T]:
    """Build a present Option.

    ``None`` raises ``InvalidArgument``. An Option argument is unwrapped one
    level, so ``Some(Some(1)) == Some(1)`` and ``Some(Nothing()) == Nothing()``.
    """
    if value is None:
        raise _invalid("Expected `value` not to be None")
    if isinstance(value, Option):
        if value.is_some():
            return Option._build(OptionTag.SOME, value._value)
        return Nothing()
    return Option._build(OptionTag.SOME, value)


def Nothing(*args: object, **kwargs: object) -> Option[Any]:
    """Build an empty Option. Arguments are accepted and ignored."""
    return Option._build(OptionTag.NONE)


some = present = Some
none = absent = Nothing
