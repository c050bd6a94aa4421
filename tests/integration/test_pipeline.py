"""Integration tests composing capture, lifting and monad operations."""

import json
from typing import Any

import pytest

from src.fallible import (
    Failure,
    bind,
    chain,
    failure,
    fapply,
    fmap,
    from_try,
    is_failure,
    is_success,
    run_captured,
    run_or_recover,
    success,
    traverse,
    wrap,
)


@wrap
def parse_json(text: str) -> Any:
    return json.loads(text)


@wrap
def divide(a: float, b: float) -> float:
    return a / b


def require_key(key: str) -> Any:
    def lookup(payload: dict[str, Any]) -> Any:
        if key not in payload:
            return failure(KeyError(key))
        return success(payload[key])

    return lookup


class TestScenarios:
    def test_map_doubles_success(self) -> None:
        assert fmap(lambda x: x * 2, success(10)) == success(20)

    def test_map_skips_failure(self) -> None:
        calls = []
        error = Exception("boom")

        def double(x: int) -> int:
            calls.append(x)
            return x * 2

        result = fmap(double, failure(error))
        assert result == failure(Exception("boom"))
        assert from_try(result) is error
        assert calls == []

    def test_wrapped_divide_by_zero(self) -> None:
        result = divide(10, 0)
        assert is_failure(result)
        assert isinstance(from_try(result), ZeroDivisionError)

    def test_recover_from_parse_error(self) -> None:
        result = run_or_recover(lambda: int("abc"), lambda e: success(-1))
        assert result == success(-1)


class TestJsonPipeline:
    def test_happy_path(self) -> None:
        result = chain(
            parse_json('{"numerator": 9, "denominator": 3}'),
            lambda doc: fmap(lambda d: (d["numerator"], d["denominator"]), success(doc)),
            lambda pair: divide(*pair),
        )
        assert result == success(3.0)

    def test_invalid_json(self) -> None:
        result = bind(parse_json("{not json"), require_key("value"))
        assert isinstance(result, Failure)
        assert isinstance(result.error, json.JSONDecodeError)

    def test_missing_key_returned_as_failure(self) -> None:
        result = bind(parse_json('{"other": 1}'), require_key("value"))
        assert result == failure(KeyError("value"))

    def test_applicative_combination(self) -> None:
        add = success(lambda a: lambda b: a + b)
        partial = fapply(add, parse_json("2"))
        assert fapply(partial, parse_json("40")) == success(42)

    def test_traverse_documents(self) -> None:
        documents = ['{"value": 1}', '{"value": 2}', '{"value": 3}']
        values = traverse(
            lambda text: bind(parse_json(text), require_key("value")), documents
        )
        assert values == success([1, 2, 3])

    def test_traverse_reports_first_broken_document(self) -> None:
        documents = ['{"value": 1}', "[", '{"value": 3}']
        values = traverse(parse_json, documents)
        assert is_failure(values)
        assert not is_success(values)

    def test_bind_callback_faults_escape(self) -> None:
        with pytest.raises(KeyError):
            bind(parse_json('{"a": 1}'), lambda doc: success(doc["missing"]))

    def test_map_callback_faults_captured(self) -> None:
        result = fmap(lambda doc: doc["missing"], parse_json('{"a": 1}'))
        assert result == run_captured(lambda: {"a": 1}["missing"])
