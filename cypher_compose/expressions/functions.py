# cypher_compose/expressions/functions.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cypher_compose.core.utils import CypherCompilable
from cypher_compose.expressions.operations import as_expression

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


class CypherFunction:
    """A function call such as `count(this0)`; raw arguments become Params."""

    __slots__ = ("name", "args")

    def __init__(self, name: str, *args: Any) -> None:
        self.name = name
        self.args: tuple[CypherCompilable, ...] = tuple(as_expression(arg) for arg in args)

    def get_cypher(self, env: Environment) -> str:
        args = ", ".join(arg.get_cypher(env) for arg in self.args)
        return f"{self.name}({args})"


def count(expression: Any) -> CypherFunction:
    return CypherFunction("count", expression)


def collect(expression: Any) -> CypherFunction:
    return CypherFunction("collect", expression)


def coalesce(expression: Any, *fallbacks: Any) -> CypherFunction:
    return CypherFunction("coalesce", expression, *fallbacks)


def element_id(reference: Any) -> CypherFunction:
    return CypherFunction("elementId", reference)
