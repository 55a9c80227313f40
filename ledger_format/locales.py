"""Locale and currency formatting rules.

Every supported ``(locale, currency)`` pair maps to one immutable
:class:`LocaleConfig` in :data:`LOCALE_TABLE`. The table is built once at
import and exposed read-only; :func:`resolve_locale` is the only way callers
obtain a config, and it rejects unknown codes with
:class:`~ledger_format.errors.InvalidArgumentError`.

Supported pairs
---------------
============  ========  ============  ======  ============
locale        currency  date pattern  symbol  negatives
============  ========  ============  ======  ============
``en-US``     ``USD``   MM/dd/yyyy    ``$``   ``-$1,234.56``
``en-US``     ``EUR``   dd/MM/yyyy    ``€``   ``-€1,234.56``
``nl-NL``     ``USD``   dd/MM/yyyy    ``$``   ``($1.234,56)``
``nl-NL``     ``EUR``   dd/MM/yyyy    ``€``   ``(€1.234,56)``
============  ========  ============  ======  ============

Note that en-US only uses the month-first pattern together with USD.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from .errors import InvalidArgumentError
from .logging_setup import get_logger

logger = get_logger("ledger_format.locales")


class NegativePattern(StrEnum):
    """How a negative currency amount is written."""

    MINUS_PREFIX = "minus-prefix"
    PARENTHESES = "parentheses"


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Resolved formatting profile for one locale/currency pair."""

    locale_code: str
    currency_code: str
    date_pattern: str
    currency_symbol: str
    negative_pattern: NegativePattern
    decimal_separator: str
    group_separator: str
    header: str


# ---------------------------------------------------------------------------
# Static rule data
# ---------------------------------------------------------------------------

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType({"USD": "$", "EUR": "€"})

_EN_US_HEADER = "Date       | Description               | Change       "
_NL_NL_HEADER = "Datum      | Omschrijving              | Verandering  "


def _build_table() -> Mapping[tuple[str, str], LocaleConfig]:
    # (locale, currency) -> date pattern
    date_patterns = {
        ("en-US", "USD"): "MM/dd/yyyy",
        ("en-US", "EUR"): "dd/MM/yyyy",
        ("nl-NL", "USD"): "dd/MM/yyyy",
        ("nl-NL", "EUR"): "dd/MM/yyyy",
    }
    # locale -> (negative pattern, decimal separator, group separator, header)
    conventions = {
        "en-US": (NegativePattern.MINUS_PREFIX, ".", ",", _EN_US_HEADER),
        "nl-NL": (NegativePattern.PARENTHESES, ",", ".", _NL_NL_HEADER),
    }

    table: dict[tuple[str, str], LocaleConfig] = {}
    for (locale_code, currency_code), date_pattern in date_patterns.items():
        negative, decimal_sep, group_sep, header = conventions[locale_code]
        table[(locale_code, currency_code)] = LocaleConfig(
            locale_code=locale_code,
            currency_code=currency_code,
            date_pattern=date_pattern,
            currency_symbol=CURRENCY_SYMBOLS[currency_code],
            negative_pattern=negative,
            decimal_separator=decimal_sep,
            group_separator=group_sep,
            header=header,
        )
    return MappingProxyType(table)


LOCALE_TABLE: Mapping[tuple[str, str], LocaleConfig] = _build_table()


def supported_locales() -> tuple[str, ...]:
    """Return the accepted locale codes in table order."""

    return tuple(dict.fromkeys(locale for locale, _ in LOCALE_TABLE))


def supported_currencies() -> tuple[str, ...]:
    """Return the accepted (upper-case) currency codes in table order."""

    return tuple(dict.fromkeys(currency for _, currency in LOCALE_TABLE))


def resolve_locale(locale_code: str, currency_code: str) -> LocaleConfig:
    """Return the :class:`LocaleConfig` for ``locale_code``/``currency_code``.

    Locale codes are matched exactly (``"en-US"``, ``"nl-NL"``); currency
    codes are matched case-insensitively. The locale is checked first, so a
    call where both are wrong reports the locale.

    Raises
    ------
    InvalidArgumentError
        When either code is not supported.
    """

    if locale_code not in supported_locales():
        raise InvalidArgumentError(f"Invalid locale: {locale_code!r}")

    currency = currency_code.upper() if isinstance(currency_code, str) else None
    if currency not in CURRENCY_SYMBOLS:
        raise InvalidArgumentError(f"Invalid currency: {currency_code!r}")

    config = LOCALE_TABLE[(locale_code, currency)]
    logger.debug(
        "Resolved locale %s/%s (date=%s, negatives=%s)",
        locale_code,
        currency,
        config.date_pattern,
        config.negative_pattern,
    )
    return config


__all__ = [
    "CURRENCY_SYMBOLS",
    "LOCALE_TABLE",
    "LocaleConfig",
    "NegativePattern",
    "resolve_locale",
    "supported_currencies",
    "supported_locales",
]
