# cypher_compose/expressions/operations.py
"""Comparison and boolean operators used in WHERE predicates.

Operands that do not compile themselves (plain Python values) are wrapped in a
fresh `Param`, so a predicate never inlines a literal into the query text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cypher_compose.core.exceptions import ExpressionError
from cypher_compose.core.utils import CypherCompilable
from cypher_compose.references.param import Param

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


def as_expression(value: Any) -> CypherCompilable:
    """Return `value` if it already compiles, otherwise wrap it in a `Param`."""
    if isinstance(value, CypherCompilable):
        return value
    return Param(value)


class ComparisonOp:
    """Binary (`a = b`) or postfix (`a IS NULL`) comparison."""

    __slots__ = ("operator", "left", "right")

    def __init__(
        self,
        operator: str,
        left: CypherCompilable,
        right: CypherCompilable | None = None,
    ) -> None:
        self.operator = operator
        self.left = left
        self.right = right

    def get_cypher(self, env: Environment) -> str:
        left = self.left.get_cypher(env)
        if self.right is None:
            return f"{left} {self.operator}"
        return f"{left} {self.operator} {self.right.get_cypher(env)}"


class BooleanOp:
    """`AND` / `OR` over two or more operands.

    Nested boolean operands are parenthesized so precedence never depends on
    the reader knowing that AND binds tighter than OR.
    """

    __slots__ = ("operator", "operands")

    def __init__(self, operator: str, operands: tuple[CypherCompilable, ...]) -> None:
        self.operator = operator
        self.operands = operands

    def get_cypher(self, env: Environment) -> str:
        return f" {self.operator} ".join(_wrap(operand, env) for operand in self.operands)


class NotOp:
    __slots__ = ("operand",)

    def __init__(self, operand: CypherCompilable) -> None:
        self.operand = operand

    def get_cypher(self, env: Environment) -> str:
        return f"NOT {_wrap(self.operand, env)}"


def _wrap(operand: CypherCompilable, env: Environment) -> str:
    cypher = operand.get_cypher(env)
    if isinstance(operand, BooleanOp):
        return f"({cypher})"
    return cypher


def _comparison(operator: str, left: Any, right: Any) -> ComparisonOp:
    return ComparisonOp(operator, as_expression(left), as_expression(right))


def eq(left: Any, right: Any) -> ComparisonOp:
    return _comparison("=", left, right)


def neq(left: Any, right: Any) -> ComparisonOp:
    return _comparison("<>", left, right)


def gt(left: Any, right: Any) -> ComparisonOp:
    return _comparison(">", left, right)


def gte(left: Any, right: Any) -> ComparisonOp:
    return _comparison(">=", left, right)


def lt(left: Any, right: Any) -> ComparisonOp:
    return _comparison("<", left, right)


def lte(left: Any, right: Any) -> ComparisonOp:
    return _comparison("<=", left, right)


def in_(left: Any, right: Any) -> ComparisonOp:
    return _comparison("IN", left, right)


def contains(left: Any, right: Any) -> ComparisonOp:
    return _comparison("CONTAINS", left, right)


def starts_with(left: Any, right: Any) -> ComparisonOp:
    return _comparison("STARTS WITH", left, right)


def ends_with(left: Any, right: Any) -> ComparisonOp:
    return _comparison("ENDS WITH", left, right)


def is_null(operand: Any) -> ComparisonOp:
    return ComparisonOp("IS NULL", as_expression(operand))


def is_not_null(operand: Any) -> ComparisonOp:
    return ComparisonOp("IS NOT NULL", as_expression(operand))


def _boolean(operator: str, operands: tuple[Any, ...]) -> CypherCompilable:
    if not operands:
        raise ExpressionError(f"{operator} needs at least one operand")
    compiled = tuple(as_expression(operand) for operand in operands)
    if len(compiled) == 1:
        return compiled[0]
    return BooleanOp(operator, compiled)


def and_(*operands: Any) -> CypherCompilable:
    """Conjoin predicates. A single operand is returned unchanged."""
    return _boolean("AND", operands)


def or_(*operands: Any) -> CypherCompilable:
    """Disjoin predicates. A single operand is returned unchanged."""
    return _boolean("OR", operands)


def not_(operand: Any) -> NotOp:
    return NotOp(as_expression(operand))
