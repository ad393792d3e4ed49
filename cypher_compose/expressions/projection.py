# cypher_compose/expressions/projection.py
"""Projection columns (`expr AS alias`) and sort items (`expr DESC`).

Columns are accepted in three shapes:
- a compilable expression (`node`, `node.property("title")`, `count(node)`);
- an `(expression, alias)` tuple, where `alias` is a `Variable` or a plain
  identifier string;
- the string `"*"`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from cypher_compose.core.exceptions import ExpressionError, create_error_context
from cypher_compose.core.utils import CypherCompilable, escape_identifier, validate_identifier
from cypher_compose.references.reference import Variable

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment

STAR = "*"

ProjectionInput = Union[CypherCompilable, tuple[Any, Union[Variable, str]], str]

_SORT_DIRECTIONS = ("ASC", "DESC")


class ProjectionColumn:
    __slots__ = ("expression", "alias")

    def __init__(self, expression: CypherCompilable | None, alias: Variable | str | None) -> None:
        self.expression = expression
        self.alias = alias

    @property
    def is_star(self) -> bool:
        return self.expression is None

    def get_cypher(self, env: Environment) -> str:
        if self.expression is None:
            return STAR
        cypher = self.expression.get_cypher(env)
        if self.alias is None:
            return cypher
        if isinstance(self.alias, Variable):
            alias = self.alias.get_cypher(env)
        else:
            alias = escape_identifier(self.alias)
        return f"{cypher} AS {alias}"


def to_column(column: ProjectionInput) -> ProjectionColumn:
    """Normalize one caller-supplied column.

    Raises:
        ExpressionError: For anything that is not one of the accepted shapes.
        InvalidIdentifierError: For a string alias that is not an identifier.
    """
    if column == STAR:
        return ProjectionColumn(None, None)
    if isinstance(column, tuple):
        if len(column) != 2:
            raise ExpressionError(
                "Aliased projection columns must be (expression, alias) pairs",
                details=create_error_context(length=len(column)),
            )
        expression, alias = column
        if not isinstance(expression, CypherCompilable):
            raise ExpressionError(f"Cannot project {expression!r}")
        if not isinstance(alias, Variable):
            alias = validate_identifier(alias, "projection alias")
        return ProjectionColumn(expression, alias)
    if isinstance(column, CypherCompilable):
        return ProjectionColumn(column, None)
    raise ExpressionError(f"Cannot project {column!r}")


def to_columns(columns: tuple[ProjectionInput, ...]) -> list[ProjectionColumn]:
    normalized = [to_column(column) for column in columns]
    if any(column.is_star for column in normalized[1:]):
        raise ExpressionError("'*' must be the first projection column")
    return normalized


class SortItem:
    __slots__ = ("expression", "direction")

    def __init__(self, expression: CypherCompilable, direction: str = "ASC") -> None:
        self.expression = expression
        self.direction = direction

    def get_cypher(self, env: Environment) -> str:
        cypher = self.expression.get_cypher(env)
        if self.direction == "ASC":
            return cypher
        return f"{cypher} {self.direction}"


def to_sort_item(item: CypherCompilable | tuple[CypherCompilable, str]) -> SortItem:
    if isinstance(item, tuple):
        if len(item) != 2:
            raise ExpressionError("Sort items must be (expression, direction) pairs")
        expression, direction = item
        direction = str(direction).upper()
        if direction not in _SORT_DIRECTIONS:
            raise ExpressionError(
                f"Unknown sort direction {item[1]!r}",
                details=create_error_context(allowed=list(_SORT_DIRECTIONS)),
            )
    else:
        expression, direction = item, "ASC"
    if not isinstance(expression, CypherCompilable):
        raise ExpressionError(f"Cannot sort by {expression!r}")
    return SortItem(expression, direction)
