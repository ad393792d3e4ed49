"""Pattern chains and their renderer."""

from .pattern import (
    Direction,
    NodeElement,
    PartialPattern,
    Pattern,
    RelationshipElement,
    as_pattern,
)

__all__ = [
    "Direction",
    "NodeElement",
    "PartialPattern",
    "Pattern",
    "RelationshipElement",
    "as_pattern",
]
