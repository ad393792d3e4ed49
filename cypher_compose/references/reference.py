# cypher_compose/references/reference.py
"""Identity-bearing handles for pattern elements and variables.

A Reference has no text of its own: it is turned into a label by the
Environment of the build that meets it first. References are immutable and
compare by identity, so the same instance used in several clauses (or in
several Union branches) always compiles to the same label within one build.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from cypher_compose.core.exceptions import PatternError
from cypher_compose.core.utils import validate_identifier

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment
    from cypher_compose.references.property import PropertyRef


class ReferenceKind(str, Enum):
    NODE = "node"
    RELATIONSHIP = "relationship"
    VARIABLE = "variable"
    PATH = "path"
    PARAM = "param"


@dataclass(frozen=True, eq=False, kw_only=True)
class Reference:
    """Base handle. `prefix` overrides the configured prefix for this kind."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.VARIABLE

    prefix: str | None = None

    def __post_init__(self) -> None:
        if self.prefix is not None:
            validate_identifier(self.prefix, "reference prefix")

    def get_cypher(self, env: Environment) -> str:
        return env.label_for(self)

    def property(self, *path: str) -> PropertyRef:
        """Reference a (possibly nested) property, e.g. `node.property("address", "city")`."""
        from cypher_compose.references.property import PropertyRef

        return PropertyRef(self, *path)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind.value} at {id(self):#x}>"


@dataclass(frozen=True, eq=False, kw_only=True, repr=False)
class Variable(Reference):
    """A plain variable, typically used as a projection alias."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.VARIABLE


@dataclass(frozen=True, eq=False, kw_only=True, repr=False)
class Node(Reference):
    """A graph node. `labels` are used when a pattern does not override them."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.NODE

    labels: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "labels", normalize_labels(self.labels))


@dataclass(frozen=True, eq=False, kw_only=True, repr=False)
class Relationship(Reference):
    """A graph relationship with an optional relationship type."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.RELATIONSHIP

    type: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.type is not None and not isinstance(self.type, str):
            raise PatternError(f"Relationship type must be a string, got {self.type!r}")


@dataclass(frozen=True, eq=False, kw_only=True, repr=False)
class Path(Reference):
    """A named path, bound with `clause.assign_to_path(path)`."""

    kind: ClassVar[ReferenceKind] = ReferenceKind.PATH


def normalize_labels(values: Iterable[str] | str, role: str = "node label") -> tuple[str, ...]:
    if isinstance(values, str):
        values = (values,)
    result = []
    for value in values:
        if not isinstance(value, str) or not value:
            raise PatternError(f"Invalid {role}: {value!r}")
        result.append(value)
    return tuple(result)
