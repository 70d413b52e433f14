"""Tests for the Result type and the AppError helpers."""

import pytest

from shortener.application.common.errors import (
    ErrorCategory,
    ErrorKind,
    application_error,
    from_domain_exception,
    infrastructure_error,
    not_found,
)
from shortener.application.common.result import Failure, Success, collect
from shortener.domain.shortening.exceptions import InvalidUrlError


class TestResult:
    def test_success(self) -> None:
        result = Success(2)
        assert result.is_success
        assert not result.is_failure
        assert result.unwrap() == 2
        assert result.value_or(0) == 2
        assert result.map(lambda v: v * 3) == Success(6)
        assert result.flat_map(lambda v: Failure("boom")) == Failure("boom")
        with pytest.raises(ValueError):
            result.unwrap_error()

    def test_failure(self) -> None:
        result: Failure[str] = Failure("boom")
        assert result.is_failure
        assert result.unwrap_error() == "boom"
        assert result.value_or(7) == 7
        assert result.map(lambda v: v) is result
        assert result.map_error(str.upper) == Failure("BOOM")
        with pytest.raises(ValueError):
            result.unwrap()


class TestCollect:
    def test_all_successes(self) -> None:
        assert collect([Success(1), Success(2), Success(3)]) == Success([1, 2, 3])

    def test_empty(self) -> None:
        assert collect([]) == Success([])

    def test_first_failure_short_circuits(self) -> None:
        seen: list[int] = []

        def results():  # type: ignore[no-untyped-def]
            for index, result in enumerate([Success(1), Failure("a"), Failure("b")]):
                seen.append(index)
                yield result

        assert collect(results()) == Failure("a")
        assert seen == [0, 1]


class TestAppError:
    def test_from_domain_exception(self) -> None:
        exc = InvalidUrlError("nope", "Must Start With http or https")

        error = from_domain_exception(exc)

        assert error.category == ErrorCategory.DOMAIN
        assert error.kind == ErrorKind.INVALID_URL
        assert error.message == "Invalid Url: Must Start With http or https"
        assert error.details == {"url": "nope"}
        assert error.cause is exc

    def test_factories_set_category(self) -> None:
        assert application_error(ErrorKind.INVALID_SESSION, "x").category == (
            ErrorCategory.APPLICATION
        )
        cause = RuntimeError("db down")
        error = infrastructure_error(ErrorKind.STORAGE_FAILURE, "x", cause=cause, table="t")
        assert error.category == ErrorCategory.INFRASTRUCTURE
        assert error.cause is cause
        assert error.details == {"table": "t"}

    def test_not_found(self) -> None:
        error = not_found("ShortUrl", "abc")
        assert error.kind == ErrorKind.RESOURCE_NOT_FOUND
        assert error.message == "ShortUrl abc not found"
        assert str(error) == "RESOURCE_NOT_FOUND: ShortUrl abc not found"
