"""Opt-in argument checking for development builds.

The flag is read from the environment on every call, so it can be
flipped at runtime (or by a test) without reimporting okerr.
"""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Report whether results passed to okerr helpers should be checked.

    An explicit ``override`` wins. Otherwise the check is on only when
    ``OKERR_VALIDATE`` is set to ``"1"``; any other value leaves it off.
    """
    if override is not None:
        return bool(override)
    return os.getenv("OKERR_VALIDATE") == "1"
