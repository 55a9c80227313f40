"""Environment-driven defaults for the command line.

The CLI loads a ``.env`` file from the working directory (without overriding
variables that are already set) before calling :func:`load_settings`.
Values are read fresh on every call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

CURRENCY_ENV = "LEDGER_FORMAT_CURRENCY"
LOCALE_ENV = "LEDGER_FORMAT_LOCALE"
LOG_LEVEL_ENV = "LEDGER_FORMAT_LOG_LEVEL"

DEFAULT_CURRENCY = "USD"
DEFAULT_LOCALE = "en-US"


@dataclass(frozen=True, slots=True)
class Settings:
    currency: str = DEFAULT_CURRENCY
    locale: str = DEFAULT_LOCALE
    log_level: str | None = None


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""

    return Settings(
        currency=os.getenv(CURRENCY_ENV) or DEFAULT_CURRENCY,
        locale=os.getenv(LOCALE_ENV) or DEFAULT_LOCALE,
        log_level=os.getenv(LOG_LEVEL_ENV) or None,
    )


__all__ = ["CURRENCY_ENV", "LOCALE_ENV", "LOG_LEVEL_ENV", "Settings", "load_settings"]
