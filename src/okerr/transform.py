"""Transformation: apply a function to one channel of a ``Result``."""

from __future__ import annotations

import typing
from typing import TYPE_CHECKING

from okerr.core.result_primitives import _require_result, err, ok

if TYPE_CHECKING:
    from collections.abc import Callable

    from okerr.core.result_primitives import Ok, Result

T = typing.TypeVar("T")
T2 = typing.TypeVar("T2")
E = typing.TypeVar("E")
E2 = typing.TypeVar("E2")

__all__ = ["map_result_data", "map_result_data_or_default", "map_result_error"]


def map_result_data(
    result: Result[T, E], func: Callable[[T], T2]
) -> Result[T2, E]:
    """Map the data of an ``Ok``; return an ``Err`` unchanged.

    ``func`` is never called for an ``Err``, and the same ``Err`` object is
    returned.
    """
    _require_result(result, "map_result_data")
    return ok(func(result.data)) if result.success else result


def map_result_data_or_default(
    result: Result[T, E], func: Callable[[T], T2], default_value: T2
) -> Ok[T2]:
    """Map the data of an ``Ok``, or wrap ``default_value`` for an ``Err``.

    Always returns an ``Ok``: the error channel is discarded.

    Args:
        result: The result to map.
        func: Applied to the data when ``result`` is an ``Ok``.
        default_value: Wrapped in ``Ok`` when ``result`` is an ``Err``.
    """
    _require_result(result, "map_result_data_or_default")
    return ok(func(result.data)) if result.success else ok(default_value)


def map_result_error(
    result: Result[T, E], func: Callable[[E], E2]
) -> Result[T, E2]:
    """Map the error of an ``Err``; return an ``Ok`` unchanged."""
    _require_result(result, "map_result_error")
    return result if result.success else err(func(result.error))
