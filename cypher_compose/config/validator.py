# cypher_compose/config/validator.py
"""
Configuration validation utilities.

This module provides a single public function `validate_all()` that:
1. Reads the current `CypherComposeSettings` object (field-level checks such as
   identifier syntax already ran when it was constructed).
2. Performs cross-field sanity checks that cannot be expressed with Pydantic
   field validators (e.g., prefixes that can produce the same identifier).
3. Returns a structured health report dictionary.

The report layout:

{
    "overall_health": "healthy" | "warning" | "error",
    "issues": {
        "errors":   [{ "field": "<field>", "message": "<msg>" }, ...],
        "warnings": [{ "field": "<field>", "message": "<msg>" }, ...],
        "info":     [{ "field": "<field>", "message": "<msg>" }, ...],
    }
}
"""

from __future__ import annotations

import logging
from itertools import permutations

from .settings import PREFIX_FIELDS


def _add_issue(
    issues: dict[str, list[dict[str, str]]],
    severity: str,
    field: str,
    message: str,
) -> None:
    """Utility to append an issue entry to the report."""
    issues.setdefault(severity, []).append({"field": field, "message": message})


def _prefixes_can_collide(shorter: str, longer: str) -> bool:
    # "n" + "12" and "n1" + "2" both render as "n12"
    return longer.startswith(shorter) and longer[len(shorter) :].isdigit()


def validate_all() -> dict:
    """
    Validate the current configuration state.

    Returns a health-report dict with overall status and detailed issue lists.
    """
    from cypher_compose import config

    current_settings = config.settings
    issues: dict[str, list[dict[str, str]]] = {"errors": [], "warnings": [], "info": []}

    if current_settings is None:
        _add_issue(
            issues, "errors", "settings", "Configuration object not initialized."
        )
        return {
            "overall_health": "error",
            "issues": issues,
        }

    # Prefix ambiguity. Environments skip colliding labels, but the numbering
    # then stops matching the allocation order.
    prefixes = {name: getattr(current_settings, name) for name in PREFIX_FIELDS}
    for (name_a, prefix_a), (name_b, prefix_b) in permutations(prefixes.items(), 2):
        if prefix_a != prefix_b and _prefixes_can_collide(prefix_a, prefix_b):
            _add_issue(
                issues,
                "warnings",
                name_b,
                (
                    f"{name_b} ({prefix_b!r}) is {name_a} ({prefix_a!r}) followed by "
                    "digits; generated identifiers may collide."
                ),
            )

    # Clause separator must be whitespace, otherwise clauses run together
    separator = current_settings.CLAUSE_SEPARATOR
    if not separator or not separator.isspace():
        _add_issue(
            issues,
            "errors",
            "CLAUSE_SEPARATOR",
            f"CLAUSE_SEPARATOR must be non-empty whitespace; got {separator!r}.",
        )

    if not isinstance(logging.getLevelName(current_settings.LOG_LEVEL), int):
        _add_issue(
            issues,
            "errors",
            "LOG_LEVEL",
            f"LOG_LEVEL {current_settings.LOG_LEVEL!r} is not a known logging level.",
        )

    overall = "healthy"
    if issues["errors"]:
        overall = "error"
    elif issues["warnings"]:
        overall = "warning"

    return {
        "overall_health": overall,
        "issues": issues,
    }
