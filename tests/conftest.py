"""Pytest configuration and shared fixtures for the sidenotes test suite."""

import logging
import os
from typing import Callable

import pytest
from bs4 import BeautifulSoup
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def parse() -> Callable[[str], BeautifulSoup]:
    """Parse an HTML fragment with the built-in parser.

    Returns
    -------
    callable
        Function turning an HTML string into a BeautifulSoup tree.

    """

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture(autouse=True)
def _clear_sidenotes_env(monkeypatch):
    """Keep SIDENOTES_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("SIDENOTES_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)
