"""Public API for the ``ledger_format`` package.

Two entry points:

- :func:`create_entry` builds a :class:`~ledger_format.models.LedgerEntry`
  from an ISO date string, a description and an amount in minor units
  (cents).
- :func:`format_entries` renders entries as a fixed-width table for one
  currency/locale pair.

Both raise :class:`~ledger_format.errors.InvalidArgumentError` on bad input
and never return partial output.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal

from .errors import InvalidArgumentError
from .fields import format_row
from .locales import resolve_locale
from .logging_setup import get_logger
from .models import LedgerEntries, LedgerEntry
from .sorting import sort_entries

logger = get_logger("ledger_format.api")

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def create_entry(date_text: str, description: str, change: int) -> LedgerEntry:
    """Build a ledger entry.

    Parameters
    ----------
    date_text:
        Calendar date as ``YYYY-MM-DD`` exactly (no other ISO forms, no padding).
    description:
        Free-text label, stored as given.
    change:
        Signed amount in minor units; ``-200`` becomes ``Decimal("-2.00")``.

    Raises
    ------
    InvalidArgumentError
        When ``date_text`` does not parse or ``change`` is not an integer.
    """

    if not isinstance(date_text, str) or not _DATE_RE.fullmatch(date_text):
        raise InvalidArgumentError(f"Invalid date: {date_text!r}")
    try:
        parsed = date.fromisoformat(date_text)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid date: {date_text!r}") from e

    # bool is an int subclass but never a meaningful amount
    if not isinstance(change, int) or isinstance(change, bool):
        raise InvalidArgumentError(f"Change must be an integer number of minor units, got {change!r}")

    # Shift the exponent instead of dividing so no context precision applies.
    amount = Decimal(Decimal(change).as_tuple()._replace(exponent=-2))
    return LedgerEntry(date=parsed, description=description, change=amount)


def format_entries(currency: str, locale: str, entries: LedgerEntries) -> str:
    """Render ``entries`` as a ledger table.

    The first line is the locale's column header. Each entry follows on its
    own line in display order (negatives first, then the rest, each block
    sorted by date, description and amount). There is no trailing newline;
    an empty ledger renders as the header alone.

    Raises
    ------
    InvalidArgumentError
        When ``currency`` or ``locale`` is not supported.
    """

    config = resolve_locale(locale, currency)
    rows = [format_row(entry, config) for entry in sort_entries(entries)]
    logger.debug("Formatted %d entries for %s/%s", len(rows), config.locale_code, config.currency_code)
    return "\n".join([config.header, *rows])


__all__ = ["create_entry", "format_entries"]
