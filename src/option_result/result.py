"""Result type for explicit error handling without exceptions.

Provides a Rust-inspired Result[T, E] pattern for operations that can fail.
Forces callers to handle both success and error cases explicitly.

A Result is immutable. Exactly one of its value and error slots is in use,
selected by an explicit tag; ``None`` is a legitimate value for either slot.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, TypeVar

from option_result.config import get_settings
from option_result.errors import TypeMismatch, UnwrapError, describe_type

if TYPE_CHECKING:
    from option_result.option import Option

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultTag(str, Enum):
    """Discriminant of a Result."""

    OK = "ok"
    ERR = "err"


def _mismatch(message: str) -> TypeMismatch:
    logger.debug("Result contract violation: %s", message)
    return TypeMismatch(message)


def _expect_result(value: object, what: str) -> Result[Any, Any]:
    if not isinstance(value, Result):
        raise _mismatch(f"Expected {what} a Result, received {describe_type(value)}")
    return value


@dataclass(frozen=True, slots=True, init=False, repr=False)
class Result(Generic[T, E]):
    """Either a success value (``Ok``) or an error (``Err``).

    Build instances with ``Ok``, ``Err``, ``Result.try_call`` or
    ``Result.from_value``; calling ``Result(...)`` directly raises
    ``TypeMismatch``.
    """

    _tag: ResultTag
    _value: Any
    _error: Any

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise _mismatch("Result cannot be instantiated directly; use Ok() or Err()")

    @classmethod
    def _build(cls, tag: ResultTag, value: Any = None, error: Any = None) -> Result[Any, Any]:
        result = object.__new__(cls)
        object.__setattr__(result, "_tag", tag)
        object.__setattr__(result, "_value", value)
        object.__setattr__(result, "_error", error)
        return result

    # -- Static constructors -------------------------------------------------

    @staticmethod
    def try_call(fn: Callable[[], T]) -> Result[T, BaseException]:
        """Run ``fn`` and capture a raised exception as ``Err``."""
        capture: type[BaseException] = (
            BaseException if get_settings().capture_base_exceptions else Exception
        )
        try:
            return Ok(fn())
        except capture as e:
            logger.debug("Captured %s from %r", describe_type(e), fn)
            return Err(e)

    @staticmethod
    def from_value(value: Any, *, is_error: bool | None = None) -> Result[Any, Any]:
        """Wrap ``value`` as ``Ok`` or ``Err``.

        Pass ``is_error`` to choose explicitly. Without it the value is
        classified by its type name: a name containing ``"Error"`` means
        ``Err``. That heuristic is kept for compatibility and is deprecated.
        """
        if is_error is not None:
            return Err(value) if is_error else Ok(value)

        if get_settings().warn_on_heuristic_from:
            warnings.warn(
                "Result.from_value() without `is_error` classifies by type name; "
                "pass is_error= or use Ok()/Err() instead",
                DeprecationWarning,
                stacklevel=2,
            )
        type_name = describe_type(value)
        looks_like_error = "Error" in type_name
        logger.debug(
            "Classified %s as %s by type name", type_name, "Err" if looks_like_error else "Ok"
        )
        return Err(value) if looks_like_error else Ok(value)

    # -- Query ---------------------------------------------------------------

    @property
    def tag(self) -> ResultTag:
        return self._tag

    def is_ok(self) -> bool:
        return self._tag is ResultTag.OK

    def is_err(self) -> bool:
        return self._tag is ResultTag.ERR

    # -- Transform -----------------------------------------------------------

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to a success value.

        The result goes through the ``Ok`` constructor, so a Result returned
        by ``fn`` is flattened.
        """
        if self.is_ok():
            return Ok(fn(self._value))
        return self  # type: ignore[return-value]

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to an error. The output is always an ``Err``."""
        if self.is_ok():
            return self  # type: ignore[return-value]
        mapped = fn(self._error)
        if isinstance(mapped, Result):
            return mapped if mapped.is_err() else Err(mapped._value)
        return Err(mapped)

    def map_or(self, fallback: U, fn: Callable[[T], U]) -> U:
        if self.is_ok():
            return fn(self._value)
        return fallback

    def map_or_else(self, compute_fallback: Callable[[E], U], fn: Callable[[T], U]) -> U:
        if self.is_ok():
            return fn(self._value)
        return compute_fallback(self._error)

    # -- Sequencing ----------------------------------------------------------

    def and_(self, rhs: Result[U, E]) -> Result[U, E]:
        _expect_result(rhs, "`rhs` to be")
        if self.is_err():
            return self  # type: ignore[return-value]
        return rhs

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning callback onto a success value."""
        if self.is_ok():
            return _expect_result(fn(self._value), "`fn` to return")
        return self  # type: ignore[return-value]

    flat_map = and_then

    def or_(self, rhs: Result[T, F]) -> Result[T, F]:
        _expect_result(rhs, "`rhs` to be")
        if self.is_ok():
            return self  # type: ignore[return-value]
        return rhs

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        if self.is_ok():
            return self  # type: ignore[return-value]
        return _expect_result(fn(self._error), "`fn` to return")

    # -- Extraction ----------------------------------------------------------

    def unwrap(self) -> T:
        if self.is_ok():
            return self._value
        raise UnwrapError(
            f"called `Result.unwrap()` on an `Err` value: {self._error}", context=self._error
        )

    def expect(self, message: str) -> T:
        if self.is_ok():
            return self._value
        raise UnwrapError(f"{message}: {self._error}", context=self._error)

    def unwrap_or(self, fallback: T) -> T:
        if self.is_ok():
            return self._value
        return fallback

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        if self.is_ok():
            return self._value
        return fn(self._error)

    def unwrap_err(self) -> E:
        if self.is_err():
            return self._error
        raise UnwrapError(
            f"called `Result.unwrap_err()` on an `Ok` value: {self._value}", context=self._value
        )

    def expect_err(self, message: str) -> E:
        if self.is_err():
            return self._error
        raise UnwrapError(f"{message}: {self._value}", context=self._value)

    def try_(self) -> T:
        """Return the success value or raise the contained error.

        Lets a function that itself returns a Result bail out early, the way
        Rust's ``?`` operator does. Errors that are not exceptions are raised
        wrapped in ``UnwrapError``.
        """
        if self.is_ok():
            return self._value
        if isinstance(self._error, BaseException):
            raise self._error
        raise UnwrapError(f"Propagated `Err` value: {self._error}", context=self._error)

    # -- Conversion to Option ------------------------------------------------

    def ok(self) -> Option[T]:
        """The success value as an Option; ``Nothing`` for an ``Err``."""
        from option_result.option import Nothing, Option

        if self.is_ok():
            return Option.from_value(self._value)
        return Nothing()

    def err(self) -> Option[E]:
        """The error as an Option; ``Nothing`` for an ``Ok``."""
        from option_result.option import Nothing, Option

        if self.is_err():
            return Option.from_value(self._error)
        return Nothing()

    def transpose(self) -> Option[Result[Any, E]]:
        """Turn a Result of an Option into an Option of a Result.

        ``Err(e)`` maps to ``Some(Err(e))``; ``Ok(Nothing)`` maps to
        ``Nothing``; ``Ok(Some(v))`` maps to ``Some(Ok(v))``.
        """
        from option_result.option import Nothing, Option, Some

        if self.is_err():
            return Some(self)
        inner = self._value
        if not isinstance(inner, Option):
            raise _mismatch(
                f"Expected success value to be an Option, received {describe_type(inner)}"
            )
        if inner.is_none():
            return Nothing()
        return Some(Ok(inner.unwrap()))

    def iter(self) -> Iterator[T]:
        return iter(self)

    def __iter__(self) -> Iterator[T]:
        if self.is_ok():
            yield self._value

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"


def Ok(value: T) -> Result[T, Any]:
    """Build a successful Result.

    A Result argument lends its own state: ``Ok(Err(e)) == Err(e)`` and
    ``Ok(Ok(v)) == Ok(v)``.
    """
    if isinstance(value, Result):
        return Result._build(value._tag, value._value, value._error)
    return Result._build(ResultTag.OK, value=value)


def Err(error: E) -> Result[Any, E]:
    """Build a failed Result.

    A Result argument lends its own state: ``Err(Ok(v)) == Ok(v)`` and
    ``Err(Err(e)) == Err(e)``.
    """
    if isinstance(error, Result):
        return Result._build(error._tag, error._value, error._error)
    return Result._build(ResultTag.ERR, error=error)


ok = success = Ok
err = failure = Err
