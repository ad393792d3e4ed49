# cypher_compose/references/param.py
"""Literal values destined for the parameter map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from cypher_compose.core.utils import validate_identifier
from cypher_compose.references.reference import ReferenceKind

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


@dataclass(frozen=True, eq=False)
class Param:
    """Wrap one literal value so it is sent as `$key` instead of inlined.

    Two Params holding equal values still get two keys; reuse the same instance
    to send a value once.

    Args:
        value: The literal. Stored as-is and returned in the build's params.
        prefix: Optional key prefix overriding `PARAM_PREFIX`.
    """

    kind: ClassVar[ReferenceKind] = ReferenceKind.PARAM

    value: Any
    prefix: str | None = None

    def __post_init__(self) -> None:
        if self.prefix is not None:
            validate_identifier(self.prefix, "parameter prefix")

    def get_cypher(self, env: Environment) -> str:
        return f"${env.key_for(self)}"

    def __repr__(self) -> str:
        return f"Param({self.value!r})"
