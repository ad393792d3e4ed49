# cypher_compose/clauses/__init__.py
"""Clause variants and the Union combinator."""

from cypher_compose.clauses.clause import Clause, PatternClause
from cypher_compose.clauses.create import Create
from cypher_compose.clauses.match import Match, OptionalMatch
from cypher_compose.clauses.projection import Return, With
from cypher_compose.clauses.union import Union

__all__ = [
    "Clause",
    "PatternClause",
    "Match",
    "OptionalMatch",
    "Create",
    "With",
    "Return",
    "Union",
]
