"""Shared fixtures for HTTP tests."""

import pytest
from fastapi.testclient import TestClient

from gophertalk.api.main import create_app
from gophertalk.history import TranslationHistory


@pytest.fixture
def api_history():
    h = TranslationHistory(workers=2)
    yield h
    h.close()


@pytest.fixture
def client(api_history):
    """Test client bound to a private history."""
    app = create_app(history=api_history)
    with TestClient(app) as c:
        yield c
