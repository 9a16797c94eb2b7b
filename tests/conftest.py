# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LinesOrPixels test suite.

Sets TRACE logging for the whole run and keeps the developer's
``LINESORPIXELS_LOG_LEVEL`` from leaking into tests.
"""

from __future__ import annotations

import pytest

from linesorpixels.config import logging
from linesorpixels.config.logging import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def silence_lopx_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
