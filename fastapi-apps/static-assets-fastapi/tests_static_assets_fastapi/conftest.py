"""Pytest configuration and fixtures for the static-assets-fastapi app tests."""
import importlib
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

APP_ROOT = Path(__file__).resolve().parent.parent

CACHE_CONTROL_ENV = (
    "CACHE_CONTROL_DEFAULT",
    "CACHE_CONTROL_RULES",
    "CACHE_CONTROL_CONFIG_FILE",
    "CACHE_CONTROL_CONFIG_SECTION",
)


@pytest.fixture
def load_app(monkeypatch):
    """
    Return a loader that imports app.main fresh.

    Settings are read at import time, so set the environment with
    monkeypatch before calling the loader.
    """
    monkeypatch.syspath_prepend(str(APP_ROOT))
    for name in CACHE_CONTROL_ENV:
        monkeypatch.delenv(name, raising=False)

    def _load():
        for name in list(sys.modules):
            if name == "app" or name.startswith("app."):
                monkeypatch.delitem(sys.modules, name)
        return importlib.import_module("app.main")

    return _load


@pytest.fixture
def client_for(load_app):
    """Return a loader that builds a TestClient around a freshly imported app."""

    def _client():
        return TestClient(load_app().app)

    return _client
