"""Pytest configuration and shared fixtures for htmltoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from htmltoc.constants import CONFIG_ENV_VAR

# Register custom Hypothesis profiles; the autouse config isolation fixture is function scoped
_SUPPRESSED = [HealthCheck.function_scoped_fixture]
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose, suppress_health_check=_SUPPRESSED)
settings.register_profile("dev", max_examples=50, suppress_health_check=_SUPPRESSED)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate],
    suppress_health_check=_SUPPRESSED,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is removed after the test."""
    path = create_test_temp_dir()
    yield path
    cleanup_test_dir(path)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep config discovery away from the developer's real files."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Drop handlers installed by the CLI's logging setup after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def sample_page() -> str:
    """A small rendered page with a marker and a two-level heading structure."""
    return (
        "<p>[toc]</p>\n"
        "<h1>Getting Started</h1>\n"
        "<p>Intro text.</p>\n"
        "<h2>Installation</h2>\n"
        "<p>pip install it.</p>\n"
        "<h2>Configuration</h2>\n"
        "<h3>Site Options</h3>\n"
        "<h1>Reference</h1>\n"
    )
