"""Shared fixtures for the vyakarana test suite."""

import pytest

from vyakarana.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from VYAKARANA_* variables and runtime overrides."""
    for name in ("ACCURATE_TOKENIZATION", "UNICODE_FORM", "MAX_SUGGESTIONS", "LOG_LEVEL"):
        monkeypatch.delenv(f"VYAKARANA_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()
