"""Mapping helpers over the data and error channels."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from okerr import (
    err,
    is_err,
    is_ok,
    map_result_data,
    map_result_data_or_default,
    map_result_error,
    ok,
    unwrap,
)

pytestmark = pytest.mark.unit


def test_map_data_on_ok() -> None:
    mapped = map_result_data(ok(1), lambda d: d + 1)

    assert unwrap(mapped) == 2


def test_map_data_on_err_short_circuits() -> None:
    original = err("error")
    func = Mock()

    mapped = map_result_data(original, func)

    func.assert_not_called()
    assert mapped is original
    assert is_err(mapped)
    assert mapped.error == "error"


def test_map_data_or_default_on_ok() -> None:
    mapped = map_result_data_or_default(ok(1), lambda d: d + 1, 2)

    assert is_ok(mapped)
    assert unwrap(mapped) == 2


def test_map_data_or_default_on_err_is_always_ok() -> None:
    func = Mock()

    mapped = map_result_data_or_default(err("error"), func, 2)

    func.assert_not_called()
    assert is_ok(mapped)
    assert mapped.data == 2


def test_map_error_on_err() -> None:
    mapped = map_result_error(err("error"), lambda e: e + "error")

    assert is_err(mapped)
    assert mapped.error == "errorerror"


def test_map_error_on_ok_short_circuits() -> None:
    original = ok(1)
    func = Mock()

    mapped = map_result_error(original, func)

    func.assert_not_called()
    assert mapped is original
    assert is_ok(mapped)
    assert mapped.data == 1


def test_mapping_never_mutates_input() -> None:
    original = ok([1, 2])

    mapped = map_result_data(original, lambda d: [*d, 3])

    assert original.data == [1, 2]
    assert mapped.data == [1, 2, 3]


def test_func_called_exactly_once() -> None:
    func = Mock(return_value="mapped")

    map_result_data(ok(1), func)
    map_result_error(err("e"), func)
    map_result_data_or_default(ok(2), func, "default")

    assert func.call_count == 3
    assert [c.args for c in func.call_args_list] == [(1,), ("e",), (2,)]


@pytest.mark.parametrize(
    ("operation", "result"),
    [
        (lambda r, f: map_result_data(r, f), ok(1)),
        (lambda r, f: map_result_data_or_default(r, f, 0), ok(1)),
        (lambda r, f: map_result_error(r, f), err("e")),
    ],
)
def test_func_exception_propagates_unmodified(operation, result) -> None:
    boom = ZeroDivisionError("boom")

    def func(_: object) -> object:
        raise boom

    with pytest.raises(ZeroDivisionError) as exc:
        operation(result, func)

    assert exc.value is boom
