"""Ordering of ledger entries for display.

Entries are split into two blocks, debits (``change < 0``) first and then
everything else, and each block is sorted by a plain text key::

    "<date>@<description>@<change>"

The key uses the default string forms (``date.isoformat()`` and
``str(Decimal)``), not the display formats. It is compared as a string, so
``2015-01-01@Buy@-10.00`` and ``2015-01-01@Buy@-2.00`` order by character,
not by amount. ISO dates are zero padded, which keeps the date prefix in
chronological order.
"""

from __future__ import annotations

from .models import LedgerEntries, LedgerEntry


def sort_key(entry: LedgerEntry) -> str:
    """Return the composite text key used to order ``entry`` within its block."""

    return f"{entry.date.isoformat()}@{entry.description}@{entry.change}"


def sort_entries(entries: LedgerEntries) -> list[LedgerEntry]:
    """Return ``entries`` as negatives then non-negatives, each sorted by key.

    ``sorted`` is stable, so entries with identical keys keep their input
    order.
    """

    negatives: list[LedgerEntry] = []
    non_negatives: list[LedgerEntry] = []
    for entry in entries:
        (negatives if entry.change < 0 else non_negatives).append(entry)

    return sorted(negatives, key=sort_key) + sorted(non_negatives, key=sort_key)


__all__ = ["sort_entries", "sort_key"]
