"""Result primitives: a closed ``Ok | Err`` union with an explicit discriminant.

Every operation in the library branches on ``result.success`` rather than
on the concrete class, so the two variants stay plain frozen records with
no shared base class.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import Literal, TypeGuard

from okerr._dev_flags import dev_validate_enabled
from okerr.errors import InvalidResultError

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")
E = typing.TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(typing.Generic[T]):
    """A successful outcome carrying ``data``."""

    data: T
    success: Literal[True] = dataclasses.field(default=True, init=False, repr=False)


@dataclasses.dataclass(frozen=True, slots=True)
class Err(typing.Generic[E]):
    """A failed outcome carrying ``error``."""

    error: E
    success: Literal[False] = dataclasses.field(
        default=False, init=False, repr=False
    )


Result = Ok[T] | Err[E]


def ok(data: T) -> Ok[T]:
    """Create a successful result carrying ``data``."""
    return Ok(data)


def err(error: E) -> Err[E]:
    """Create an unsuccessful result carrying ``error``."""
    return Err(error)


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Return True if ``result`` is the ``Ok`` variant.

    Narrows ``result`` to ``Ok`` in the true branch so ``result.data`` can be
    read without a cast.
    """
    _require_result(result, "is_ok")
    return result.success


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Return True if ``result`` is the ``Err`` variant."""
    _require_result(result, "is_err")
    return not result.success


def _validate_result_reason(obj: object) -> str | None:
    """Internal: return None when ``obj`` is a well-formed result, else a reason."""
    if not isinstance(obj, Ok | Err):
        return f"expected Ok or Err, got {type(obj).__name__}"
    if obj.success is not isinstance(obj, Ok):
        return (
            f"{type(obj).__name__} carries discriminant success={obj.success!r}"
        )
    return None


def is_result(obj: object) -> TypeGuard[Result[typing.Any, typing.Any]]:
    """Return True if ``obj`` is an ``Ok`` or ``Err`` with a consistent tag.

    For a human-readable reason when the check fails, use
    ``explain_invalid_result``.
    """
    return _validate_result_reason(obj) is None


def explain_invalid_result(obj: object) -> str | None:
    """Return a concise reason when ``obj`` is not a valid result, else None."""
    return _validate_result_reason(obj)


def _require_result(obj: object, operation: str) -> None:
    """Reject non-results when dev validation is on (``OKERR_VALIDATE=1``)."""
    if not dev_validate_enabled():
        return
    reason = _validate_result_reason(obj)
    if reason is not None:
        logger.debug("%s rejected its argument: %s", operation, reason)
        raise InvalidResultError(
            f"{operation}: {reason}",
            hint="Build results with ok() or err().",
        )
