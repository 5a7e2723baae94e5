# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import os

import pytest

from wear_stopwatch.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    # drop STOPWATCH_* vars from the developer's shell
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    yield
    # ! load_dotenv writes straight into os.environ; monkeypatch can't see those
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            del os.environ[key]
