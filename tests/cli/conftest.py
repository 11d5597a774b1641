"""Fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch) -> list:
    """Keep the CLI from reconfiguring logging; record the settings it would use."""
    calls = []
    monkeypatch.setattr("openiban.cli.main.configure_from_settings", calls.append)
    # Wide terminal so Rich tables do not wrap values
    monkeypatch.setenv("COLUMNS", "200")
    return calls
