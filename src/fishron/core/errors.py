# src/fishron/core/errors.py

from __future__ import annotations


class FishronError(Exception):
    """
    User-facing, recoverable error (bad command, malformed arguments).

    The message is shown to the user as-is (after the OOPS prefix),
    so keep it short and actionable.
    """
