# tests/conftest.py
import os
import sys

import pytest

# Ensure repository root is on PYTHONPATH for tests
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from cypher_compose import config  # noqa: E402
from cypher_compose.core.environment import Environment  # noqa: E402


@pytest.fixture
def env() -> Environment:
    """A fresh Environment built from the default configuration."""
    return Environment()


@pytest.fixture
def override_settings(monkeypatch):
    """Set `CYPHER_COMPOSE_*` variables and reload; settings are restored afterwards.

    Usage:
        def test_x(override_settings):
            override_settings(NODE_PREFIX="n")
    """

    def _apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"CYPHER_COMPOSE_{key}", str(value))
        return config.reload()

    yield _apply

    monkeypatch.undo()
    config.reload()
