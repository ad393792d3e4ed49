# cypher_compose/references/property.py
from __future__ import annotations

from typing import TYPE_CHECKING

from cypher_compose.core.exceptions import ExpressionError
from cypher_compose.core.utils import escape_identifier

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment
    from cypher_compose.references.reference import Reference


class PropertyRef:
    """Property access on a reference: `this0.title`, `this0.address.city`."""

    __slots__ = ("_reference", "_path")

    def __init__(self, reference: Reference, *path: str) -> None:
        if not path:
            raise ExpressionError("PropertyRef needs at least one property name")
        for key in path:
            if not isinstance(key, str) or not key:
                raise ExpressionError(f"Invalid property name: {key!r}")
        self._reference = reference
        self._path = path

    @property
    def reference(self) -> Reference:
        return self._reference

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    def property(self, *path: str) -> PropertyRef:
        return PropertyRef(self._reference, *self._path, *path)

    def get_cypher(self, env: Environment) -> str:
        keys = "".join(f".{escape_identifier(key)}" for key in self._path)
        return f"{self._reference.get_cypher(env)}{keys}"

    def __repr__(self) -> str:
        return f"PropertyRef({self._reference!r}, {'.'.join(self._path)})"
