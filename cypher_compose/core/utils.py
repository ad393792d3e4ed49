# cypher_compose/core/utils.py
"""Small helpers shared by every compilable building block."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cypher_compose.core.exceptions import InvalidIdentifierError, create_error_context

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@runtime_checkable
class CypherCompilable(Protocol):
    """Anything that renders itself to Cypher text against an Environment."""

    def get_cypher(self, env: Environment) -> str: ...


def is_valid_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def validate_identifier(name: str, role: str) -> str:
    """Return `name` unchanged if it is a plain Cypher identifier.

    Args:
        name: Candidate identifier.
        role: What the identifier is used for; included in the error details.

    Raises:
        InvalidIdentifierError: If `name` is not a string or needs escaping.
    """
    if not isinstance(name, str) or not is_valid_identifier(name):
        raise InvalidIdentifierError(
            f"Invalid {role}: {name!r}",
            details=create_error_context(role=role, value=repr(name)),
        )
    return name


def escape_identifier(name: str) -> str:
    """Quote a label, relationship type or property key when it needs it.

    Plain identifiers are returned unchanged; anything else is wrapped in
    backticks with embedded backticks doubled.
    """
    if is_valid_identifier(name):
        return name
    escaped = name.replace("`", "``")
    return f"`{escaped}`"


def compile_if_exists(
    element: CypherCompilable | None, env: Environment, prefix: str = ""
) -> str:
    """Compile `element` and prepend `prefix`, or return "" when there is nothing to emit."""
    if element is None:
        return ""
    cypher = element.get_cypher(env)
    if not cypher:
        return ""
    return f"{prefix}{cypher}"
