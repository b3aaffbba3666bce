"""Extraction: turn a ``Result`` into its success payload.

All six extractors return ``data`` for an ``Ok``. They differ only in what
happens for an ``Err``:

- ``expect`` / ``unwrap`` raise; use them where program logic already
  guarantees success.
- ``unwrap_or_default`` / ``unwrap_or_else`` substitute a fallback.
- ``unwrap_or_undefined`` / ``unwrap_or_null`` return a sentinel.
"""

from __future__ import annotations

import typing
from typing import TYPE_CHECKING, Final

from okerr.core.result_primitives import _require_result
from okerr.errors import UnmetExpectationError, UnsuccessfulResultError

if TYPE_CHECKING:
    from collections.abc import Callable

    from okerr.core.result_primitives import Result

T = typing.TypeVar("T")
E = typing.TypeVar("E")

__all__ = [
    "UNDEFINED",
    "Undefined",
    "expect",
    "unwrap",
    "unwrap_or_default",
    "unwrap_or_else",
    "unwrap_or_null",
    "unwrap_or_undefined",
]


@typing.final
class Undefined:
    """Type of the ``UNDEFINED`` sentinel (an absent value, unlike ``None``)."""

    __slots__ = ()
    _instance: typing.ClassVar[Undefined | None] = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()


def expect(result: Result[T, E], message: str) -> T:
    """Return the data of an ``Ok``, else raise with ``message``.

    Args:
        result: The result to unwrap.
        message: Raised verbatim if ``result`` is an ``Err``.

    Raises:
        UnmetExpectationError: ``result`` is an ``Err``.
    """
    _require_result(result, "expect")
    if result.success:
        return result.data
    raise UnmetExpectationError(message)


def unwrap(result: Result[T, E]) -> T:
    """Return the data of an ``Ok``, else raise ``UnsuccessfulResultError``.

    The raised message is always ``"unsuccessful result"``; the error payload
    is not included.
    """
    _require_result(result, "unwrap")
    if result.success:
        return result.data
    raise UnsuccessfulResultError


def unwrap_or_default(result: Result[T, E], default_value: T) -> T:
    """Return the data of an ``Ok``, else ``default_value``."""
    _require_result(result, "unwrap_or_default")
    return result.data if result.success else default_value


def unwrap_or_else(result: Result[T, E], func: Callable[[E], T]) -> T:
    """Return the data of an ``Ok``, else ``func(error)``.

    ``func`` is only called for an ``Err``. Anything it raises propagates
    as-is.
    """
    _require_result(result, "unwrap_or_else")
    return result.data if result.success else func(result.error)


def unwrap_or_undefined(result: Result[T, E]) -> T | Undefined:
    """Return the data of an ``Ok``, else ``UNDEFINED``."""
    _require_result(result, "unwrap_or_undefined")
    return result.data if result.success else UNDEFINED


def unwrap_or_null(result: Result[T, E]) -> T | None:
    """Return the data of an ``Ok``, else ``None``."""
    _require_result(result, "unwrap_or_null")
    return result.data if result.success else None
