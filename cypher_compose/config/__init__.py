# cypher_compose/config/__init__.py
"""Expose cypher_compose configuration.

The primary API is the [`settings`](settings.py) singleton, a Pydantic
`BaseSettings` instance populated from the process environment (variables
prefixed with `CYPHER_COMPOSE_`) and an optional `.env` file.

Configuration precedence and lifecycle:
- On initial import, configuration is loaded by importing `config.settings`,
  which constructs the `settings` singleton.
- [`reload()`](loader.py) re-reads `.env` with override enabled and replaces
  `settings` with a fresh instance.
- Readers must go through the module attribute (`config.settings.NODE_PREFIX`)
  rather than binding the instance at import time, or they will not observe
  reloads.
"""

from typing import Any

from .settings import CypherComposeSettings as CypherComposeSettings
from .settings import settings as settings
from .validator import validate_all as validate_all


def get(key: str) -> Any:
    """Return the value of a configuration attribute from `settings`.

    Args:
        key: Attribute name on the `settings` singleton.

    Returns:
        The current value of the named attribute.

    Raises:
        AttributeError: If `key` is not a valid attribute on `settings`.
    """
    return getattr(settings, key)


def set(key: str, value: Any) -> None:
    """Set a configuration attribute on `settings` at runtime.

    This mutates the in-memory settings instance and does not persist to `.env`.
    Values are not re-validated.

    Args:
        key: Attribute name on the `settings` singleton.
        value: Value to assign.

    Raises:
        AttributeError: If `key` is not a valid attribute on `settings`.
    """
    if key not in CypherComposeSettings.model_fields:
        raise AttributeError(f"Unknown configuration key: {key}")
    setattr(settings, key, value)


def reload() -> CypherComposeSettings:
    """Reload configuration and replace this package's `settings` reference.

    Returns:
        The freshly constructed settings instance.

    Raises:
        pydantic.ValidationError: If the environment holds invalid values.
    """
    from .loader import reload_settings

    return reload_settings()
