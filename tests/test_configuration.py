# tests/test_configuration.py
"""
Tests for the configuration package.

These tests verify:
1. The validation helper reports no errors on a default configuration.
2. The reload mechanism updates settings when environment variables change.
3. Cross-field checks flag prefixes and separators that break output.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cypher_compose import config


def test_validation_report_is_healthy():
    """The default configuration should be reported as healthy."""
    from cypher_compose.config.validator import validate_all

    report = validate_all()
    assert report["overall_health"] == "healthy"
    # No errors or warnings on a freshly loaded default config
    assert not report["issues"]["errors"]
    assert not report["issues"]["warnings"]


def test_reload_applies_environment_changes(override_settings):
    """Changing an env var followed by ``config.reload()`` updates the settings."""
    fresh = override_settings(NODE_PREFIX="node")

    assert fresh is config.settings
    assert config.settings.NODE_PREFIX == "node"
    assert config.get("NODE_PREFIX") == "node"


def test_reload_is_reverted_by_fixture():
    """Settings overridden in an earlier test do not leak."""
    assert config.settings.NODE_PREFIX == "this"


def test_invalid_prefix_is_rejected(monkeypatch):
    monkeypatch.setenv("CYPHER_COMPOSE_VARIABLE_PREFIX", "9var")

    with pytest.raises(ValidationError):
        config.CypherComposeSettings()


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("CYPHER_COMPOSE_LOG_LEVEL", "debug")

    assert config.CypherComposeSettings().LOG_LEVEL == "DEBUG"


def test_ambiguous_prefixes_warn(override_settings):
    override_settings(NODE_PREFIX="n", VARIABLE_PREFIX="n1")

    report = config.validate_all()

    assert report["overall_health"] == "warning"
    fields = [issue["field"] for issue in report["issues"]["warnings"]]
    assert fields == ["VARIABLE_PREFIX"]


def test_identical_prefixes_are_not_ambiguous():
    # node and relationship labels share "this" by default
    report = config.validate_all()

    assert report["issues"]["warnings"] == []


def test_non_whitespace_separator_is_an_error(override_settings):
    override_settings(CLAUSE_SEPARATOR=";")

    report = config.validate_all()

    assert report["overall_health"] == "error"
    assert report["issues"]["errors"][0]["field"] == "CLAUSE_SEPARATOR"


def test_unknown_log_level_is_an_error(override_settings):
    override_settings(LOG_LEVEL="chatty")

    report = config.validate_all()

    assert report["overall_health"] == "error"
    assert report["issues"]["errors"][0]["field"] == "LOG_LEVEL"


def test_set_and_get(monkeypatch):
    monkeypatch.setattr(config.settings, "LOG_COMPILED_QUERIES", False)

    config.set("LOG_COMPILED_QUERIES", True)

    assert config.get("LOG_COMPILED_QUERIES") is True


def test_set_unknown_key():
    with pytest.raises(AttributeError):
        config.set("NOT_A_SETTING", 1)


def test_reload_settings_rebinds_both_references(monkeypatch):
    """``reload_settings`` replaces the instance on the package and its module."""
    import sys

    from cypher_compose.config.loader import reload_settings

    settings_module = sys.modules["cypher_compose.config.settings"]
    monkeypatch.setenv("CYPHER_COMPOSE_NODE_PREFIX", "n")
    try:
        fresh = reload_settings()

        assert fresh is config.settings
        assert fresh is settings_module.settings
        assert config.get("NODE_PREFIX") == "n"
    finally:
        monkeypatch.undo()
        config.reload()

    assert config.settings.NODE_PREFIX == "this"


def test_reload_applies_to_new_environments(override_settings):
    from cypher_compose import Environment, Node

    override_settings(NODE_PREFIX="n")

    assert Environment().label_for(Node()) == "n0"


def test_repeated_reloads(override_settings):
    override_settings(PARAM_PREFIX="a")
    override_settings(PARAM_PREFIX="b")

    assert config.reload().PARAM_PREFIX == "b"
