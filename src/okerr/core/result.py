"""Typed Result container for explicit success/failure returns.

Motivation
----------
Callers get back a value they must inspect instead of an exception or a bare
``None``. A :class:`Result` is exactly one of two variants:

- :class:`Ok` wraps a success value, which may be ``None`` ("empty"),
- :class:`Err` wraps an error value, which may never be ``None``.

All ``ok(None)`` / ``empty()`` constructions share one canonical empty
``Ok`` instance.

Combinators
-----------
- predicates: ``is_ok``, ``is_err``, ``is_empty``, ``is_ok_and``, ``is_err_and``,
- views: ``ok()``, ``err()``,
- mapping: ``map``, ``map_err``, ``map_or``, ``map_or_else``,
- inspection: ``inspect``, ``inspect_err``,
- unwraps: ``expect``, ``expect_err``, ``unwrap``, ``unwrap_err``,
  ``unwrap_or``, ``unwrap_or_else``,
- flow: ``and_``, ``and_then``, ``or_``, ``or_else``.

Example
-------
>>> from okerr import ok, err, Result
>>> def parse_int(x: str) -> Result[int, str]:
...     return ok(int(x)) if x.isdigit() else err("not a digit")
>>> ok("42").and_then(parse_int).map(lambda v: v * 2).unwrap()
84
>>> err("fail").map_err(len).unwrap_err()
4
>>> err("fail").map_err(len).unwrap_or(0)
0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast, final

from okerr.core.settings import get_logger

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")

logger = get_logger(__name__)

UNWRAP_ON_ERR = "called `Result.unwrap()` on an `Err` value"
UNWRAP_ERR_ON_OK = "called `Result.unwrapErr()` on an `Ok` value"


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from the wrong variant."""


def _fail(message: str, result: Result[Any, Any]) -> UnwrapError:
    logger.debug("%s: %r", message, result)
    return UnwrapError(message)


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in ("Ok", "Err"):
            raise TypeError(f"Result only permits Ok and Err, not {cls.__qualname__}")

    # ----- Introspection -----------------------------------------------------
    def is_empty(self) -> bool:
        """Return ``True`` for an :class:`Ok` holding no value."""
        if self is _EMPTY:
            return True
        return isinstance(self, Ok) and cast(Ok[T, E], self).value is None

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Return ``True`` if ``Ok`` and ``pred`` holds for the value.

        ``pred`` is never called on ``Err``.
        """
        if isinstance(self, Ok):
            return pred(cast(Ok[T, E], self).value)
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Return ``True`` if ``Err`` and ``pred`` holds for the error."""
        if isinstance(self, Err):
            return pred(cast(Err[T, E], self).error)
        return False

    # ----- Views -------------------------------------------------------------
    def ok(self) -> T | None:
        """Return the success value, or ``None`` on ``Err`` and empty ``Ok``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return None

    def err(self) -> E | None:
        """Return the error value, or ``None`` on ``Ok``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        return None

    # ----- Combinators -------------------------------------------------------
    def _as_ok(self) -> Result[T, Any]:
        """Return this `Ok`, folding a `None` value into the shared empty instance."""
        if self.is_empty():
            return empty()
        return cast(Result[T, Any], self)

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate error unchanged.

        A ``None`` produced by ``fn`` folds into the empty ``Ok``.
        """
        if isinstance(self, Ok):
            return ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply ``fn`` to the error value; propagate success unchanged.

        Raises
        ------
        ValueError
            If ``fn`` returns ``None``.
        """
        if isinstance(self, Err):
            return err(fn(cast(Err[T, E], self).error))
        return self._as_ok()

    def map_or(self, fn: Callable[[T], T], fallback: T) -> T:
        """Return ``fn(value)`` if ``Ok``, else ``fallback``."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return fallback

    def map_or_else(self, fn: Callable[[T], T], fallback: Callable[[], T]) -> T:
        """Return ``fn(value)`` if ``Ok``, else ``fallback()`` computed lazily."""
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return fallback()

    def inspect(self, fn: Callable[[T], object]) -> Result[T, E]:
        """Call ``fn`` with the success value if ``Ok``; always return ``self``."""
        if isinstance(self, Ok):
            fn(cast(Ok[T, E], self).value)
        return self

    def inspect_err(self, fn: Callable[[E], object]) -> Result[T, E]:
        """Call ``fn`` with the error value if ``Err``; always return ``self``."""
        if isinstance(self, Err):
            fn(cast(Err[T, E], self).error)
        return self

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return ``other`` if ``Ok``, else this error."""
        if isinstance(self, Ok):
            return other
        return cast(Result[U, E], self)

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain computations that already return a :class:`Result`.

        ``fn`` receives the success value and is only called on ``Ok``.
        """
        if isinstance(self, Ok):
            return fn(cast(Ok[T, E], self).value)
        return cast(Result[U, E], self)

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return ``self`` if ``Ok``, else ``other``."""
        if isinstance(self, Err):
            return other
        return self._as_ok()

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """If ``Err``, call ``fn(error)``; otherwise return ``self``."""
        if isinstance(self, Err):
            return fn(cast(Err[T, E], self).error)
        return self._as_ok()

    # ----- Unwraps -----------------------------------------------------------
    def expect(self, msg: str) -> T:
        """Return the inner value if ``Ok``, else raise ``UnwrapError(msg)``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise _fail(msg, self)

    def expect_err(self, msg: str) -> E:
        """Return the error value if ``Err``, else raise ``UnwrapError(msg)``."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise _fail(msg, self)

    def unwrap(self) -> T:
        """Return the inner value if ``Ok``, else raise :class:`UnwrapError`."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        raise _fail(UNWRAP_ON_ERR, self)

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else raise :class:`UnwrapError`."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise _fail(UNWRAP_ERR_ON_OK, self)

    def unwrap_or(self, default: T) -> T:
        """Return the success value or ``default`` if ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        """Return the success value or ``fn()`` if ``Err``."""
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        return fn()

    # ----- Dunder helpers ----------------------------------------------------
    def __repr__(self) -> str:
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        return f"Err({cast(Err[T, E], self).error!r})"


@final
@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T`` (possibly ``None``)."""

    value: T


@final
@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E

    def __post_init__(self) -> None:
        if self.error is None:
            logger.debug("rejected Err construction with a None error")
            raise ValueError("error cannot be None")


_EMPTY: Ok[Any, Any] = Ok(None)


# ----- Convenience constructors ----------------------------------------------
def empty() -> Result[T, E]:
    """Return the shared empty :class:`Ok`."""
    return cast(Result[T, E], _EMPTY)


def ok(value: T | None) -> Result[T, E]:
    """Construct :class:`Ok`; ``None`` yields the shared empty instance."""
    if value is None:
        return empty()
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err`.

    Raises
    ------
    ValueError
        If ``error`` is ``None``.
    """
    return Err(error)
