# cypher_compose/clauses/union.py
"""Merge independently built queries into one `UNION` statement.

All branches are compiled against one Environment, in the order given. The
counter therefore keeps running from one branch to the next:

- a Reference instance shared by several branches (typically the alias
  Variable every branch returns) gets one label, so the branch projections
  line up;
- separately constructed References get distinct labels even when they look
  alike.

Example:
    alias = Variable()
    branches = []
    for _ in range(3):
        movie = Node(labels=["Movie"])
        branches.append(Match(movie).return_((movie, alias)))
    Union(*branches).build().text

Renders as:

    MATCH (this0:Movie)
    RETURN this0 AS var1
    UNION
    MATCH (this2:Movie)
    RETURN this2 AS var1
    UNION
    MATCH (this3:Movie)
    RETURN this3 AS var1
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from cypher_compose.core.exceptions import UnionArityError, create_error_context

if TYPE_CHECKING:
    from cypher_compose.clauses.clause import Clause
    from cypher_compose.core.environment import Environment
    from cypher_compose.models.compiled_query import CompiledQuery
    from cypher_compose.statement import Statement

logger = structlog.get_logger(__name__)


class Union:
    """Join two or more branches with `UNION` (or `UNION ALL` after `.all()`).

    Raises:
        UnionArityError: If fewer than two branches are given.
        ConstructionError: If a branch is not a Clause or Statement.
    """

    def __init__(self, *branches: Clause | Statement) -> None:
        from cypher_compose.statement import ensure_compilable

        if len(branches) < 2:
            raise UnionArityError(
                "Union needs at least two branches",
                details=create_error_context(branches=len(branches)),
            )
        self._branches = tuple(ensure_compilable(branch) for branch in branches)
        self._all = False

    @property
    def branches(self) -> tuple[Clause | Statement, ...]:
        return self._branches

    @property
    def keeps_duplicates(self) -> bool:
        return self._all

    def all(self, enabled: bool = True) -> Union:
        """Switch the separator to `UNION ALL` (keep duplicate rows)."""
        self._all = enabled
        return self

    def get_cypher(self, env: Environment) -> str:
        keyword = "UNION ALL" if self._all else "UNION"
        logger.debug(
            "Compiling union",
            branches=len(self._branches),
            keyword=keyword,
            start_index=env.size,
        )
        separator = f"{env.separator}{keyword}{env.separator}"
        return separator.join(branch.get_cypher(env) for branch in self._branches)

    def build(self) -> CompiledQuery:
        from cypher_compose.statement import build

        return build(self)
