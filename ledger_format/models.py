"""Data models for ``ledger_format``.

A ledger is just a collection of :class:`LedgerEntry` values. Entries are
frozen so they can be shared, hashed and reordered freely; how an entry is
displayed (truncation, alignment, currency symbol) is decided at render time
by :mod:`ledger_format.fields`, never stored on the entry.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """A single ledger line.

    Attributes
    ----------
    date:
        Calendar day of the transaction.
    description:
        Free-text label. Any length is accepted here.
    change:
        Signed amount in currency units, kept as an exact ``Decimal`` with two
        places of scale (``Decimal("-2.00")`` rather than ``Decimal("-2")``).
    """

    date: date
    description: str
    change: Decimal


LedgerEntries: TypeAlias = Iterable[LedgerEntry]


__all__ = ["LedgerEntry", "LedgerEntries"]
