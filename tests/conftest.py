"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

import os

import pytest

from openiban.registry import RuleRegistry, get_registry
from openiban.utils import config


@pytest.fixture
def registry() -> RuleRegistry:
    """The process-wide rule registry."""
    return get_registry()


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings, whatever the environment says."""
    for key in list(os.environ):
        if key.startswith("OPENIBAN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    monkeypatch.setattr(config, "_settings", None)
    yield
    monkeypatch.setattr(config, "_settings", None)
