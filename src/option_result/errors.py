"""Exception hierarchy for option_result.

Ordinary state mismatches (``Nothing`` vs ``Some``, ``Err`` vs ``Ok``) never
raise; they flow through the returned containers. These exceptions are for
contract violations by the caller.
"""

from __future__ import annotations

from typing import Any


class ContainerError(Exception):
    """Base exception for all option_result errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgument(ContainerError, ValueError):
    """``None`` or a ``Nothing`` was supplied where a concrete value is required."""


class UnwrapError(ContainerError):
    """Extraction attempted on a container in the wrong state.

    ``context`` holds the offending payload: the error of an ``Err`` when a
    value was expected, the value of an ``Ok`` when an error was expected, and
    ``None`` for an empty ``Option``.
    """

    def __init__(
        self, message: str, *, context: Any = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.context = context


class TypeMismatch(ContainerError, TypeError):
    """A callback or argument did not produce the required container type."""


def describe_type(value: object) -> str:
    """Short type name used in error messages."""
    return type(value).__name__
