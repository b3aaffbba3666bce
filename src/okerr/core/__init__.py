"""Core data model: the ``Ok``/``Err`` tagged union and its guards."""

from __future__ import annotations

from okerr.core.result_primitives import (
    Err,
    Ok,
    Result,
    err,
    explain_invalid_result,
    is_err,
    is_ok,
    is_result,
    ok,
)

__all__ = [
    "Err",
    "Ok",
    "Result",
    "err",
    "explain_invalid_result",
    "is_err",
    "is_ok",
    "is_result",
    "ok",
]
