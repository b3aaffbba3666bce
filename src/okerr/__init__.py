"""okerr: a small tagged-union Result type with extraction and mapping helpers.

Public API:
    - Ok / Err / Result: the two-variant result type
    - ok(), err(): constructors
    - is_ok(), is_err(): narrowing predicates
    - expect(), unwrap(), unwrap_or_*(): extraction
    - map_result_data(), map_result_data_or_default(), map_result_error(): mapping

Example:
    result = parse_port(raw)  # -> Result[str, str]
    port = unwrap_or_default(map_result_data(result, int), 8080)
"""

from __future__ import annotations

import logging

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
from okerr.errors import (
    UNSUCCESSFUL_RESULT_MESSAGE,
    InvalidResultError,
    OkErrError,
    UnmetExpectationError,
    UnsuccessfulResultError,
)
from okerr.extract import (
    UNDEFINED,
    Undefined,
    expect,
    unwrap,
    unwrap_or_default,
    unwrap_or_else,
    unwrap_or_null,
    unwrap_or_undefined,
)
from okerr.transform import (
    map_result_data,
    map_result_data_or_default,
    map_result_error,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("okerr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("okerr").addHandler(logging.NullHandler())

__all__ = [
    "UNDEFINED",
    "UNSUCCESSFUL_RESULT_MESSAGE",
    "Err",
    "InvalidResultError",
    "Ok",
    "OkErrError",
    "Result",
    "UnmetExpectationError",
    "UnsuccessfulResultError",
    "Undefined",
    "err",
    "expect",
    "explain_invalid_result",
    "is_err",
    "is_ok",
    "is_result",
    "map_result_data",
    "map_result_data_or_default",
    "map_result_error",
    "ok",
    "unwrap",
    "unwrap_or_default",
    "unwrap_or_else",
    "unwrap_or_null",
    "unwrap_or_undefined",
]
