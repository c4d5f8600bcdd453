"""Shared fixtures."""

import pytest

from gophertalk.history import TranslationHistory


@pytest.fixture(autouse=True)
def reset_history_singleton():
    """Drop the process-wide history between tests."""
    yield
    TranslationHistory.reset()


@pytest.fixture
def history():
    """Private history so tests never see each other's entries."""
    h = TranslationHistory(workers=2)
    yield h
    h.close()
