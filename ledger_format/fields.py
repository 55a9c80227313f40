"""Per-field text rendering for ledger rows.

Column widths are fixed: the date column is whatever the date pattern
produces (10 characters for the supported patterns), the description column
is 25 characters and the change column is 13 characters. Widths only pad;
an amount wider than its column pushes the row out rather than being cut.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, localcontext

from .locales import LocaleConfig, NegativePattern
from .models import LedgerEntry

DESCRIPTION_WIDTH = 25
CHANGE_WIDTH = 13
_TRUNCATED_LENGTH = 22
_ELLIPSIS = "..."

_DATE_TOKEN_RE = re.compile(r"yyyy|MM|dd")


def format_date(value: date, pattern: str) -> str:
    """Render ``value`` using a ``dd``/``MM``/``yyyy`` pattern.

    Any other characters in ``pattern`` are copied through unchanged.
    """

    parts = {
        "dd": f"{value.day:02d}",
        "MM": f"{value.month:02d}",
        "yyyy": f"{value.year:04d}",
    }
    return _DATE_TOKEN_RE.sub(lambda m: parts[m.group(0)], pattern)


def format_description(text: str) -> str:
    """Truncate long descriptions to ``22 chars + "..."`` and pad to 25."""

    if len(text) > DESCRIPTION_WIDTH:
        text = text[:_TRUNCATED_LENGTH] + _ELLIPSIS
    return text.ljust(DESCRIPTION_WIDTH)


def format_amount(amount: Decimal, config: LocaleConfig) -> str:
    """Return ``amount`` as currency text for ``config``, without alignment.

    Examples (en-US/USD, nl-NL/EUR)::

        Decimal("-1234.56") -> "-$1,234.56"   "(€1.234,56)"
        Decimal("1234.56")  -> "$1,234.56"    "€1.234,56"
    """

    # Precision sized to the amount so large values never round or trap.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 3)
        number = f"{amount.copy_abs():,.2f}"
    number = number.translate({ord(","): config.group_separator, ord("."): config.decimal_separator})
    text = f"{config.currency_symbol}{number}"

    if amount >= 0:
        return text
    if config.negative_pattern is NegativePattern.PARENTHESES:
        return f"({text})"
    return f"-{text}"


def format_change(amount: Decimal, config: LocaleConfig) -> str:
    """Render the change column, right-aligned to 13 characters.

    Non-negative amounts get one trailing space so their digits line up
    with negatives that end in ``)``.
    """

    text = format_amount(amount, config)
    if amount >= 0:
        text += " "
    return text.rjust(CHANGE_WIDTH)


def format_row(entry: LedgerEntry, config: LocaleConfig) -> str:
    """Render one table row for ``entry`` (no trailing newline)."""

    return " | ".join(
        (
            format_date(entry.date, config.date_pattern),
            format_description(entry.description),
            format_change(entry.change, config),
        )
    )


__all__ = [
    "CHANGE_WIDTH",
    "DESCRIPTION_WIDTH",
    "format_amount",
    "format_change",
    "format_date",
    "format_description",
    "format_row",
]
