"""Exception hierarchy for okerr."""

from __future__ import annotations

#: Fixed description carried by every ``UnsuccessfulResultError``.
UNSUCCESSFUL_RESULT_MESSAGE = "unsuccessful result"


class OkErrError(Exception):
    """Base exception for all okerr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnmetExpectationError(OkErrError):
    """``expect()`` was called on an ``Err``.

    The caller-supplied message is kept verbatim as the exception text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsuccessfulResultError(OkErrError):
    """``unwrap()`` was called on an ``Err``."""

    def __init__(self, message: str = UNSUCCESSFUL_RESULT_MESSAGE) -> None:
        super().__init__(
            message,
            hint="Use expect() for a custom message, or an unwrap_or_* variant "
            "to substitute a fallback.",
        )


class InvalidResultError(OkErrError, TypeError):
    """An operation received something that is not an ``Ok`` or ``Err``.

    Only raised while development validation is enabled.
    """
