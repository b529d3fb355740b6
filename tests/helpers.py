"""Fluent assertions for :class:`okerr.Result` values.

Only the public API is used (`is_ok_and`, `is_err_and`, `unwrap`,
`unwrap_err`), so the helper stays valid for any Result implementation.

    assert_that(ok(5)).is_ok().has_value(5)
"""

from __future__ import annotations

from typing import Generic, TypeVar

from okerr import Result, UnwrapError

T = TypeVar("T")
E = TypeVar("E")


class ResultAssert(Generic[T, E]):
    """Assertion object wrapping a single `Result` under test."""

    def __init__(self, actual: Result[T, E] | None) -> None:
        self.actual = actual

    def _result(self) -> Result[T, E]:
        """Return the wrapped result, failing if there is none."""
        if self.actual is None:
            raise AssertionError("Expected a result, but was <None>")
        return self.actual

    def is_empty(self) -> ResultAssert[T, E]:
        """Assert the result is the empty `Ok`."""
        if not self._result().is_empty():
            raise AssertionError(f"Expected result to be empty, but was <{self.actual!r}>")
        return self

    def is_ok(self) -> ResultAssert[T, E]:
        """Assert the result is an `Ok`."""
        if not self._result().is_ok():
            raise AssertionError(f"Expected result to be ok, but was <{self.actual!r}>")
        return self

    def is_err(self) -> ResultAssert[T, E]:
        """Assert the result is an `Err`."""
        if not self._result().is_err():
            raise AssertionError(f"Expected result to be err, but was <{self.actual!r}>")
        return self

    def has_value(self, expected: T) -> ResultAssert[T, E]:
        """Assert the result is an `Ok` whose value equals ``expected``."""
        result = self._result()
        if result.is_ok_and(lambda v: v == expected):
            return self
        try:
            value = result.unwrap()
        except UnwrapError:
            raise AssertionError(
                f"Expected result to have value <{expected!r}>, but was <{result!r}>"
            ) from None
        raise AssertionError(f"Expected result to have value <{expected!r}>, but was <{value!r}>")

    def has_error(self, expected: E) -> ResultAssert[T, E]:
        """Assert the result is an `Err` whose error equals ``expected``."""
        result = self._result()
        if result.is_err_and(lambda e: e == expected):
            return self
        try:
            error = result.unwrap_err()
        except UnwrapError:
            raise AssertionError(
                f"Expected result to have error <{expected!r}>, but was <{result!r}>"
            ) from None
        raise AssertionError(f"Expected result to have error <{expected!r}>, but was <{error!r}>")


def assert_that(actual: Result[T, E] | None) -> ResultAssert[T, E]:
    """Start a fluent assertion chain on ``actual``."""
    return ResultAssert(actual)
