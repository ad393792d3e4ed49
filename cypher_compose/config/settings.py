# cypher_compose/config/settings.py
"""
Configuration settings for cypher_compose.
Uses Pydantic BaseSettings for automatic environment variable loading.
"""

from __future__ import annotations

import re

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

PREFIX_FIELDS = (
    "NODE_PREFIX",
    "RELATIONSHIP_PREFIX",
    "VARIABLE_PREFIX",
    "PATH_PREFIX",
    "PARAM_PREFIX",
)


class CypherComposeSettings(BaseSettings):
    """Full configuration for Cypher compilation."""

    # Identifier prefixes (the allocation index is appended to these)
    NODE_PREFIX: str = "this"
    RELATIONSHIP_PREFIX: str = "this"
    VARIABLE_PREFIX: str = "var"
    PATH_PREFIX: str = "p"
    PARAM_PREFIX: str = "param"

    # Render allocation index 0 as the bare prefix ("this" instead of "this0")
    UNSUFFIXED_FIRST_IDENTIFIER: bool = False

    # Text layout
    CLAUSE_SEPARATOR: str = "\n"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    ENABLE_RICH_LOGGING: bool = True
    # Include the compiled text in build debug events
    LOG_COMPILED_QUERIES: bool = False

    @field_validator(*PREFIX_FIELDS)
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        if not _IDENTIFIER_RE.match(value):
            raise ValueError(
                f"Identifier prefix {value!r} must start with a letter or underscore "
                "and contain only letters, digits and underscores."
            )
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="CYPHER_COMPOSE_", env_file=".env", extra="ignore"
    )


settings = CypherComposeSettings()
