"""CLI for the ``ledger_format`` package.

A thin Typer wrapper over :func:`ledger_format.api.format_entries`. The root
callback loads a ``.env`` from the working directory (existing environment
wins) and configures logging; commands then read their defaults from
:func:`ledger_format.settings.load_settings`.

Examples
--------
::

    ledger-format table --locale nl-NL --currency EUR \\
        --entry "2015-01-01|Buy present|-1000" \\
        --entry "2015-01-02|Get present|1000"

    ledger-format locales
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from .api import create_entry, format_entries
from .errors import InvalidArgumentError
from .locales import LOCALE_TABLE
from .logging_setup import configure_logging, get_logger
from .models import LedgerEntry
from .settings import load_settings

logger = get_logger("ledger_format.cli")

_ENTRY_SEPARATOR = "|"


def parse_entry_option(raw: str) -> LedgerEntry:
    """Parse one ``--entry`` value of the form ``date|description|minor_units``.

    The description may itself contain ``|``; the date is taken from the
    first field and the amount from the last.
    """

    date_text, sep, rest = raw.partition(_ENTRY_SEPARATOR)
    description, sep2, amount_text = rest.rpartition(_ENTRY_SEPARATOR)
    if not sep or not sep2:
        raise InvalidArgumentError(f"Entry must look like 'date|description|minor_units', got {raw!r}")
    try:
        minor_units = int(amount_text.strip())
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid minor units in entry {raw!r}") from e
    return create_entry(date_text.strip(), description, minor_units)


def cmd_table(currency: str, locale: str, raw_entries: list[str]) -> int:
    """Print the formatted table for ``raw_entries`` to stdout.

    Errors are written to stderr and the function returns ``1``; on success
    it returns ``0``.
    """

    try:
        entries = [parse_entry_option(raw) for raw in raw_entries]
        table = format_entries(currency, locale, entries)
    except InvalidArgumentError as e:
        typer.echo(f"Error: {e.message}", err=True)
        return 1

    logger.debug("Rendered %d entries (%s/%s)", len(entries), locale, currency)
    typer.echo(table)
    return 0


def cmd_locales() -> int:
    """Print one tab-separated line per supported locale/currency pair."""

    for (locale, currency), config in LOCALE_TABLE.items():
        typer.echo(f"{locale}\t{currency}\t{config.date_pattern}\t{config.negative_pattern}")
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Render ledger entries as a fixed-width, locale-aware table.",
)


@app.command("table")
def table_cmd(
    entry: Annotated[
        list[str] | None,
        typer.Option(
            "--entry",
            "-e",
            help="Ledger entry as 'YYYY-MM-DD|description|minor_units'. Repeatable.",
        ),
    ] = None,
    *,
    currency: Annotated[
        str | None, typer.Option(help="Currency code (USD, EUR). Defaults to LEDGER_FORMAT_CURRENCY.")
    ] = None,
    locale: Annotated[
        str | None, typer.Option(help="Locale code (en-US, nl-NL). Defaults to LEDGER_FORMAT_LOCALE.")
    ] = None,
) -> None:
    """Format the given entries and print the table."""

    settings = load_settings()
    code = cmd_table(currency or settings.currency, locale or settings.locale, entry or [])
    if code:
        raise typer.Exit(code)


@app.command("locales")
def locales_cmd() -> None:
    """List supported locale/currency pairs."""

    cmd_locales()


@app.callback()
def _root() -> None:
    """Load ``.env`` from the current directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(load_settings().log_level)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    main()
