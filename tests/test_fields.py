from datetime import date
from decimal import Decimal

import pytest

from ledger_format import create_entry, resolve_locale
from ledger_format.fields import (
    format_amount,
    format_change,
    format_date,
    format_description,
    format_row,
)


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("MM/dd/yyyy", "03/07/2015"),
        ("dd/MM/yyyy", "07/03/2015"),
        ("yyyy-MM-dd", "2015-03-07"),
    ],
)
def test_format_date_patterns(pattern, expected):
    assert format_date(date(2015, 3, 7), pattern) == expected


def test_format_date_pads_small_years():
    assert format_date(date(7, 1, 2), "dd/MM/yyyy") == "02/01/0007"


def test_short_description_is_padded_not_changed():
    assert format_description("Coffee") == "Coffee                   "
    assert len(format_description("Coffee")) == 25


def test_description_of_exactly_25_characters_is_kept():
    text = "Freude schoner Gotterfun"  # 24
    assert format_description(text + "k") == text + "k"


def test_long_description_is_truncated_with_ellipsis():
    assert format_description("Freude schoner Gotterfunken") == "Freude schoner Gotterf..."


def test_empty_description():
    assert format_description("") == " " * 25


@pytest.mark.parametrize(
    ("locale", "currency", "amount", "expected"),
    [
        ("en-US", "USD", "-1234.56", "-$1,234.56"),
        ("en-US", "USD", "1234.56", "$1,234.56"),
        ("en-US", "EUR", "-0.01", "-€0.01"),
        ("en-US", "USD", "0.00", "$0.00"),
        ("en-US", "USD", "1234567.89", "$1,234,567.89"),
        ("nl-NL", "USD", "-1234.56", "($1.234,56)"),
        ("nl-NL", "EUR", "1234.56", "€1.234,56"),
        ("nl-NL", "EUR", "-2.00", "(€2,00)"),
        ("nl-NL", "USD", "999.99", "$999,99"),
        ("nl-NL", "USD", "1000000.00", "$1.000.000,00"),
    ],
)
def test_format_amount(locale, currency, amount, expected):
    assert format_amount(Decimal(amount), resolve_locale(locale, currency)) == expected


def test_format_amount_always_shows_two_decimals():
    config = resolve_locale("en-US", "USD")
    assert format_amount(Decimal("12"), config) == "$12.00"


def test_change_column_negative_has_no_trailing_space():
    config = resolve_locale("en-US", "USD")
    assert format_change(Decimal("-2.00"), config) == "       -$2.00"


def test_change_column_non_negative_has_trailing_space():
    config = resolve_locale("en-US", "USD")
    assert format_change(Decimal("1500.00"), config) == "   $1,500.00 "
    assert format_change(Decimal("0.00"), config) == "       $0.00 "


def test_change_column_parenthesized_negative():
    config = resolve_locale("nl-NL", "USD")
    assert format_change(Decimal("-2.00"), config) == "      ($2,00)"


def test_change_column_is_never_truncated():
    config = resolve_locale("en-US", "USD")
    assert format_change(Decimal("12345678.90"), config) == "$12,345,678.90 "


def test_format_row():
    entry = create_entry("2015-01-16", "Coffee", -200)
    row = format_row(entry, resolve_locale("en-US", "USD"))
    assert row == "01/16/2015 | Coffee                    |        -$2.00"


def test_format_amount_keeps_every_digit_of_large_values():
    config = resolve_locale("nl-NL", "EUR")
    amount = Decimal("-123456789012345678901234567890.99")
    assert format_amount(amount, config) == "(€123.456.789.012.345.678.901.234.567.890,99)"


def test_format_amount_rounds_extra_places_to_cents():
    config = resolve_locale("en-US", "USD")
    assert format_amount(Decimal("2.345"), config) == "$2.34"
    assert format_amount(Decimal("2.355"), config) == "$2.36"
