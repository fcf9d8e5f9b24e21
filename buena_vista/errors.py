"""Exception hierarchy for truncation failures.

All failures are synchronous and final; nothing here is retried.
"""

from __future__ import annotations

from collections.abc import Iterable


class ConfigurationError(ValueError):
    """Raised for a missing/invalid ``length`` or an unrecognized option."""

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.fields = tuple(fields)


class InvariantViolation(AssertionError):
    """Internal consistency failure; never expected to reach callers."""


class InvalidLimit(InvariantViolation):
    """A boundary search was requested for text that already fits its limit."""

    def __init__(self, limit: int, length: int) -> None:
        super().__init__(f"limit should be less than text length (limit={limit}, length={length})")
        self.limit = limit
        self.length = length


__all__ = ["ConfigurationError", "InvalidLimit", "InvariantViolation"]
