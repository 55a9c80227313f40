"""Logging for ``ledger_format``.

Library modules log through ``get_logger`` and stay silent (a ``NullHandler``
on the ``ledger_format`` logger) until an entrypoint calls
``configure_logging``. The level is passed in by the caller; the CLI takes it
from :func:`ledger_format.settings.load_settings`.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

PACKAGE_LOGGER = "ledger_format"
DEFAULT_FORMAT = "%(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def _level_from(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    if value:
        return logging.getLevelNamesMapping().get(value.strip().upper(), logging.INFO)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> None:
    """Send ``ledger_format`` records to ``stream`` (stderr by default).

    Only the first call has an effect. Unknown level names fall back to
    ``INFO``.
    """

    global _handler
    if _handler is not None:
        return

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in pkg_logger.handlers if isinstance(h, logging.NullHandler)]:
        pkg_logger.removeHandler(existing)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt))
    pkg_logger.addHandler(_handler)
    pkg_logger.setLevel(_level_from(level))
    pkg_logger.propagate = False


def reset_logging() -> None:
    """Undo :func:`configure_logging`."""

    global _handler
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
