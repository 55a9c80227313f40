"""Pytest configuration for test isolation.

The CLI reads defaults from ``LEDGER_FORMAT_*`` environment variables and
loads a ``.env`` from the working directory, and ``configure_logging`` is a
process-wide one-shot. Each test gets a clean environment, an empty working
directory and unconfigured logging so results do not depend on the host or
on test order.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ledger_format.logging_setup import reset_logging
from ledger_format.settings import CURRENCY_ENV, LOCALE_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset ``LEDGER_FORMAT_*`` and run each test from its own temp dir.

    ``setenv`` before ``delenv`` makes monkeypatch record the original state,
    so variables that ``load_dotenv`` sets during a test are removed again
    on teardown.
    """

    for name in (CURRENCY_ENV, LOCALE_ENV, LOG_LEVEL_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    reset_logging()
    yield
    reset_logging()
