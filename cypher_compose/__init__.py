# cypher_compose/__init__.py
"""Compose Cypher queries from objects and compile them to text plus parameters.

Example:
    from cypher_compose import Match, Node, eq

    movie = Node(labels=["Movie"])
    query = Match(movie).where(eq(movie.property("title"), "Heat")).return_(movie)
    cypher, params = query.build().as_tuple()
"""

from cypher_compose.clauses import (
    Clause,
    Create,
    Match,
    OptionalMatch,
    PatternClause,
    Return,
    Union,
    With,
)
from cypher_compose.core.environment import Environment
from cypher_compose.core.exceptions import (
    ConstructionError,
    CypherComposeError,
    ExpressionError,
    InvalidIdentifierError,
    PatternError,
    UnionArityError,
    UnsupportedCapabilityError,
)
from cypher_compose.expressions import (
    and_,
    coalesce,
    collect,
    contains,
    count,
    element_id,
    ends_with,
    eq,
    gt,
    gte,
    in_,
    is_not_null,
    is_null,
    lt,
    lte,
    neq,
    not_,
    or_,
    starts_with,
)
from cypher_compose.models import CompiledQuery
from cypher_compose.pattern import Direction, PartialPattern, Pattern
from cypher_compose.references import (
    Node,
    Param,
    Path,
    PropertyRef,
    Reference,
    Relationship,
    Variable,
)
from cypher_compose.statement import Statement, build

__version__ = "0.1.0"

__all__ = [
    # references
    "Node",
    "Relationship",
    "Variable",
    "Path",
    "Param",
    "PropertyRef",
    "Reference",
    # patterns
    "Pattern",
    "PartialPattern",
    "Direction",
    # clauses
    "Clause",
    "PatternClause",
    "Match",
    "OptionalMatch",
    "Create",
    "With",
    "Return",
    "Union",
    "Statement",
    # compilation
    "Environment",
    "build",
    "CompiledQuery",
    # expressions
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    "in_",
    "contains",
    "starts_with",
    "ends_with",
    "is_null",
    "is_not_null",
    "and_",
    "or_",
    "not_",
    "count",
    "collect",
    "coalesce",
    "element_id",
    # errors
    "CypherComposeError",
    "ConstructionError",
    "UnionArityError",
    "UnsupportedCapabilityError",
    "PatternError",
    "InvalidIdentifierError",
    "ExpressionError",
]
