# cypher_compose/statement.py
"""Sequence clauses into one query and compile trees into `CompiledQuery`.

`build()` is the only place an Environment is created. Everything below it in
the tree receives that Environment and writes labels and parameter values
into it while rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from cypher_compose import config
from cypher_compose.core.environment import Environment
from cypher_compose.core.exceptions import ConstructionError, create_error_context
from cypher_compose.models.compiled_query import CompiledQuery

if TYPE_CHECKING:
    from cypher_compose.clauses.clause import Clause
    from cypher_compose.clauses.union import Union

logger = structlog.get_logger(__name__)


def ensure_compilable(node: Any) -> Clause | Statement | Union:
    """Check that `node` can appear as a statement or union member."""
    from cypher_compose.clauses.clause import Clause
    from cypher_compose.clauses.union import Union

    if not isinstance(node, (Clause, Statement, Union)):
        raise ConstructionError(
            f"Expected a clause, statement or union, got {type(node).__name__}",
            details=create_error_context(type=type(node).__name__),
        )
    return node


class Statement:
    """Clauses compiled one after another, separated by the clause separator.

    Example:
        movie = Node(labels=["Movie"])
        Statement(
            Match(movie).where(eq(movie.property("year"), 1995)),
            Return(movie.property("title")),
        ).build()
    """

    def __init__(self, *nodes: Clause | Statement | Union) -> None:
        self._nodes = [ensure_compilable(node) for node in nodes]

    @property
    def nodes(self) -> tuple[Clause | Statement | Union, ...]:
        return tuple(self._nodes)

    def then(self, node: Clause | Statement | Union) -> Statement:
        """Append another clause and return the statement for chaining."""
        self._nodes.append(ensure_compilable(node))
        return self

    def get_cypher(self, env: Environment) -> str:
        texts = (node.get_cypher(env) for node in self._nodes)
        return env.separator.join(text for text in texts if text)

    def build(self) -> CompiledQuery:
        return build(self)


def build(query: Clause | Statement | Union) -> CompiledQuery:
    """Compile a query tree with a fresh Environment.

    Args:
        query: Root of the tree. Anything with clause semantics is accepted.

    Returns:
        The Cypher text together with exactly the parameters it references.

    Raises:
        ConstructionError: If `query` is not a clause, statement or union.

    Notes:
        Building the same tree twice yields identical results. Each build
        starts its own counter, so identifiers are never shared between
        separate builds.
    """
    ensure_compilable(query)
    env = Environment()
    text = query.get_cypher(env)
    params = env.parameters()

    log_kwargs: dict[str, Any] = {
        "root": type(query).__name__,
        "identifiers": env.size,
        "params": len(params),
    }
    if config.settings.LOG_COMPILED_QUERIES:
        log_kwargs["cypher"] = text
    logger.debug("Compiled query", **log_kwargs)

    return CompiledQuery(text=text, params=params)
