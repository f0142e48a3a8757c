"""Tests for the error hierarchy."""

import logging

import pytest

from option_result.errors import (
    ContainerError,
    InvalidArgument,
    TypeMismatch,
    UnwrapError,
    describe_type,
)
from option_result.option import Nothing, Some


class TestHierarchy:
    def test_all_share_base(self) -> None:
        for exc_type in (InvalidArgument, UnwrapError, TypeMismatch):
            assert issubclass(exc_type, ContainerError)

    def test_builtin_compatibility(self) -> None:
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(TypeMismatch, TypeError)

    def test_hint(self) -> None:
        error = InvalidArgument("bad", hint="use Nothing()")
        assert str(error) == "bad"
        assert error.hint == "use Nothing()"

    def test_unwrap_error_context(self) -> None:
        error = UnwrapError("wrong state", context="payload")
        assert error.context == "payload"
        assert error.hint is None

    def test_describe_type(self) -> None:
        assert describe_type(1) == "int"
        assert describe_type(Some(1)) == "Option"


class TestLogging:
    def test_contract_violation_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="option_result"):
            with pytest.raises(TypeMismatch):
                Nothing().or_else(lambda: 1)  # type: ignore[arg-type,return-value]
        assert "contract violation" in caplog.text

    def test_state_mismatch_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="option_result"):
            assert Nothing().and_(Some(1)) == Nothing()
        assert caplog.text == ""
