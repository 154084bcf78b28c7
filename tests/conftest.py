#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Pytest configuration and shared fixtures for the minigrep test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

POEM = """\
Lorem ipsum dolor sit amet.
Id adipisci harum aut vero dolorem
vel consequatur veniam aut quis
cupiditate et maxime repellat.
LOREM IPSuM DOLOR SIt AMET."""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def poem_text() -> str:
    """Provide the sample text used across the search tests."""
    return POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    """Write the sample text to a UTF-8 file and return its path."""
    path = tmp_path / "poem.txt"
    path.write_text(POEM + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep the caller's environment from leaking into tests."""
    for name in ("IGNORE_CASE", "MINIGREP_LOG_LEVEL", "MINIGREP_LOG_FILE", "MINIGREP_TRACE"):
        monkeypatch.delenv(name, raising=False)
