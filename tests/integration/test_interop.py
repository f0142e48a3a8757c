"""Integration tests for Option <-> Result conversion."""

import pytest
from hypothesis import given, strategies as st

from option_result import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    TypeMismatch,
)


def parse_port(raw: str) -> Result[int, str]:
    return Result.try_call(lambda: int(raw)).map_err(lambda e: f"not a number: {raw}")


def lookup(settings: dict[str, str], key: str) -> Option[str]:
    return Option.from_value(settings.get(key))


class TestTranspose:
    def test_nothing_to_ok_nothing(self) -> None:
        assert Nothing().transpose() == Ok(Nothing())

    def test_some_ok_to_ok_some(self) -> None:
        assert Some(Ok(5)).transpose() == Ok(Some(5))

    def test_some_err_to_err(self) -> None:
        assert Some(Err("bad")).transpose() == Err("bad")

    def test_some_ok_none_to_ok_nothing(self) -> None:
        assert Some(Ok(None)).transpose() == Ok(Nothing())

    def test_option_transpose_requires_result(self) -> None:
        with pytest.raises(TypeMismatch, match="contained value to be a Result, received int"):
            Some(5).transpose()

    def test_err_to_some_err(self) -> None:
        assert Err("bad").transpose() == Some(Err("bad"))

    def test_ok_nothing_to_nothing(self) -> None:
        assert Ok(Nothing()).transpose() == Nothing()

    def test_ok_some_to_some_ok(self) -> None:
        assert Ok(Some(5)).transpose() == Some(Ok(5))

    def test_result_transpose_requires_option(self) -> None:
        with pytest.raises(TypeMismatch, match="success value to be an Option, received int"):
            Ok(5).transpose()

    @given(st.integers())
    def test_round_trip(self, value: int) -> None:
        assert Ok(Some(value)).transpose() == Some(Ok(value))
        assert Some(Ok(value)).transpose() == Ok(Some(value))
        assert Some(Ok(value)).transpose().transpose() == Some(Ok(value))
        assert Nothing().transpose().transpose() == Nothing()


class TestPipelines:
    def test_optional_setting_to_validated_port(self) -> None:
        settings = {"port": "8080", "host": "localhost"}
        port = lookup(settings, "port").ok_or("port missing").and_then(parse_port)
        assert port == Ok(8080)

    def test_missing_setting(self) -> None:
        port = lookup({}, "port").ok_or_else(lambda: "port missing").and_then(parse_port)
        assert port == Err("port missing")

    def test_invalid_setting(self) -> None:
        port = lookup({"port": "http"}, "port").ok_or("port missing").and_then(parse_port)
        assert port == Err("not a number: http")

    def test_optional_parse(self) -> None:
        maybe_port = lookup({"port": "80"}, "port").map(parse_port).transpose()
        assert maybe_port == Ok(Some(80))
        absent_port = lookup({}, "port").map(parse_port).transpose()
        assert absent_port == Ok(Nothing())

    def test_result_back_to_option(self) -> None:
        assert parse_port("443").ok().filter(lambda p: p < 1024) == Some(443)
        assert parse_port("x").ok() == Nothing()
        assert parse_port("x").err() == Some("not a number: x")

    def test_early_return_with_try(self) -> None:
        def total(raw_ports: list[str]) -> Result[int, BaseException]:
            def run() -> int:
                return sum(Result.try_call(lambda: int(raw)).try_() for raw in raw_ports)

            return Result.try_call(run)

        assert total(["1", "2"]) == Ok(3)
        failed = total(["1", "nope"])
        assert failed.is_err()
        assert isinstance(failed.unwrap_err(), ValueError)

    def test_iteration_collects_present_values(self) -> None:
        options = [Some(1), Nothing(), Some(3)]
        assert [v for option in options for v in option] == [1, 3]
        results = [Ok(1), Err("x"), Ok(3)]
        assert [v for result in results for v in result] == [1, 3]
