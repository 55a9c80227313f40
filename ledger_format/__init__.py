"""Public interface for the ``ledger_format`` package.

Re-exports the two API functions, the entry model and the locale helpers.
There is no runtime logic here.
"""

from .api import create_entry, format_entries
from .errors import InvalidArgumentError
from .locales import (
    LOCALE_TABLE,
    LocaleConfig,
    NegativePattern,
    resolve_locale,
    supported_currencies,
    supported_locales,
)
from .models import LedgerEntries, LedgerEntry
from .sorting import sort_entries

__all__ = [
    # API
    "create_entry",
    "format_entries",
    # Models / types
    "LedgerEntry",
    "LedgerEntries",
    "LocaleConfig",
    "NegativePattern",
    "InvalidArgumentError",
    # Helpers
    "LOCALE_TABLE",
    "resolve_locale",
    "sort_entries",
    "supported_currencies",
    "supported_locales",
]
