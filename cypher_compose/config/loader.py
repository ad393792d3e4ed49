# cypher_compose/config/loader.py
"""
Configuration reload utilities.

The main public function is ``reload_settings()`` which:
1. Reloads environment variables from ``.env`` (via ``dotenv.load_dotenv``).
2. Re-creates the ``CypherComposeSettings`` instance so that any changed values
   are applied.
3. Replaces the ``settings`` reference exported by ``cypher_compose.config``.

Environments read the settings when they are constructed, so a reload affects
every build started after it and never one that is already running.
"""

from __future__ import annotations

import importlib

import structlog
from dotenv import load_dotenv

logger = structlog.get_logger(__name__)


# ``config.__init__`` rebinds the package attribute ``settings`` to the
# instance, so the submodule has to be looked up by its dotted name.
def _import_settings_module():
    return importlib.import_module("cypher_compose.config.settings")


def reload_settings():
    """
    Reload configuration from the environment and refresh the config package.

    Returns the new settings instance.

    Raises:
        pydantic.ValidationError: If the environment holds invalid values. The
            previously loaded settings stay in place in that case.
    """
    from cypher_compose import config as config_pkg

    settings_mod = _import_settings_module()

    load_dotenv(override=True)

    fresh = settings_mod.CypherComposeSettings()
    settings_mod.settings = fresh
    config_pkg.settings = fresh

    logger.debug(
        "Configuration reloaded",
        fields=len(settings_mod.CypherComposeSettings.model_fields),
    )
    return fresh
