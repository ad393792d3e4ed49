# cypher_compose/clauses/projection.py
"""Standalone `WITH` and `RETURN` clauses.

These are used when a projection starts a new clause inside a `Statement`
rather than trailing a `MATCH`/`CREATE`:

    Statement(Match(movie), With(movie, (count(actor), "actors")).where(...), Return(movie))

The body of either clause is its projection, so `order_by`, `skip` and `limit`
are always available on them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cypher_compose.clauses.capabilities import (
    Ordering,
    Projection,
    ReturnProjection,
    WithProjection,
)
from cypher_compose.clauses.clause import Clause
from cypher_compose.core.exceptions import ExpressionError
from cypher_compose.expressions.projection import to_columns

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment
    from cypher_compose.expressions.projection import ProjectionInput


class _ProjectionClause(Clause):
    projection_type: type[Projection]

    def __init__(self, *columns: ProjectionInput, distinct: bool = False) -> None:
        super().__init__()
        if not columns:
            raise ExpressionError(
                f"{self.projection_type.keyword} needs at least one column"
            )
        self._projection = self.projection_type()
        self._projection.replace(to_columns(columns), distinct)

    def _ordering(self) -> Ordering:
        return self._projection.ordering

    def get_cypher(self, env: Environment) -> str:
        return f"{self._projection.get_cypher(env)}{self.compile_capabilities(env)}"


class With(_ProjectionClause):
    # WHERE follows ORDER BY / SKIP / LIMIT in a WITH projection body
    CAPABILITIES = ("where",)
    projection_type = WithProjection


class Return(_ProjectionClause):
    CAPABILITIES = ()
    projection_type = ReturnProjection
