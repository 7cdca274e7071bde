# topmark:header:start
#
#   project      : KVConf
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the KVConf test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Record types used by tests are declared at module level: the schema
    description resolves postponed annotations against module globals.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from kvconf.config import logging

F = TypeVar("F", bound=Callable[..., object])

DATA_DIR: Path = Path(__file__).parent / "data"


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_kvconf_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure KVConf's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    KVCONF_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so captured logs contain parser/walker details.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def data_dir() -> Path:
    """Directory holding the sample ``.conf`` files shipped with the tests."""
    return DATA_DIR


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing ``text`` to ``tmp_path / name`` and returning the path.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.

    Returns:
        Callable[[str, str], Path]: ``write(name, text) -> Path``.
    """

    def _write(name: str, text: str) -> Path:
        path: Path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
