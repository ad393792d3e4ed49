# cypher_compose/clauses/match.py
from __future__ import annotations

from typing import TYPE_CHECKING

from cypher_compose.clauses.clause import PatternClause

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment
    from cypher_compose.pattern.pattern import Pattern
    from cypher_compose.references.reference import Node


class Match(PatternClause):
    """`MATCH` with every optional fragment a read/update query needs.

    Example:
        movie = Node(labels=["Movie"])
        Match(movie).where(eq(movie.property("title"), "Heat")).return_(movie)

    Renders as:

        MATCH (this0:Movie)
        WHERE this0.title = $param1
        RETURN this0
    """

    CAPABILITIES = ("path", "where", "set", "remove", "delete", "with", "return")

    def __init__(self, *patterns: Node | Pattern, optional: bool = False) -> None:
        super().__init__(*patterns)
        self._optional = optional

    @property
    def is_optional(self) -> bool:
        return self._optional

    def optional(self) -> Match:
        """Turn this clause into an `OPTIONAL MATCH`."""
        self._optional = True
        return self

    def get_cypher(self, env: Environment) -> str:
        path = self._compile_path(env)
        patterns = self._compile_patterns(env)
        keyword = "OPTIONAL MATCH" if self._optional else "MATCH"
        return f"{keyword} {path}{patterns}{self.compile_capabilities(env)}"


class OptionalMatch(Match):
    def __init__(self, *patterns: Node | Pattern) -> None:
        super().__init__(*patterns, optional=True)
