"""Shared fixtures for valtype tests."""

from __future__ import annotations

import pytest

from valtype import number, string, structure
from valtype.config import get_settings


@pytest.fixture
def user():
    """Named shape validator used across structural tests."""
    return structure(
        {
            "name": string(),
            "age": number().integer(),
            "social": structure({"twitter": string()}),
        },
        "User",
    )


@pytest.fixture
def fresh_settings(monkeypatch):
    """Re-read settings from the environment; restored after the test."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
