"""Error types raised by ``ledger_format``.

The package has a single failure mode: a caller handed in an argument the
formatter cannot work with (unknown currency or locale code, or a date that
does not parse). It subclasses :class:`ValueError` so callers that already
guard against bad values keep working.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a currency code, locale code or entry field is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


__all__ = ["InvalidArgumentError"]
