# cypher_compose/pattern/pattern.py
"""Render node/relationship chains such as `(this0:Movie)<-[this1:ACTED_IN]-(this2)`.

A chain is built left to right:

    Pattern(movie, properties={"title": "The Matrix"}).related(acted_in, direction="left").to(actor)

`related()` returns a `PartialPattern` whose only operation is `to()`, so a
chain that ends on a relationship cannot be handed to a clause. Every method
returns a new object; patterns are immutable once built.

Property values are always rendered as parameter placeholders. Values that are
not already a `Param` are wrapped in one when the element is created, which
means the same Pattern object reused in two builds sends the same Param
instances (and so the same values) both times.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from cypher_compose.core.exceptions import PatternError, create_error_context
from cypher_compose.core.utils import CypherCompilable, escape_identifier
from cypher_compose.references.param import Param
from cypher_compose.references.reference import Node, Relationship, normalize_labels

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UNDIRECTED = "undirected"


def _to_direction(direction: Direction | str) -> Direction:
    try:
        return Direction(direction)
    except ValueError:
        raise PatternError(
            f"Unknown relationship direction {direction!r}",
            details=create_error_context(allowed=[d.value for d in Direction]),
        ) from None


def _to_properties(properties: Mapping[str, Any] | None) -> tuple[tuple[str, Param], ...]:
    if properties is None:
        return ()
    if not isinstance(properties, Mapping):
        raise PatternError(f"Pattern properties must be a mapping, got {type(properties).__name__}")
    constraints = []
    for key, value in properties.items():
        if not isinstance(key, str) or not key:
            raise PatternError(f"Invalid property name: {key!r}")
        if isinstance(value, CypherCompilable) and not isinstance(value, Param):
            raise PatternError(
                f"Pattern property {key!r} must be a literal or a Param",
                details=create_error_context(value_type=type(value).__name__),
            )
        constraints.append((key, value if isinstance(value, Param) else Param(value)))
    return tuple(constraints)


def _render_properties(properties: tuple[tuple[str, Param], ...], env: Environment) -> str:
    if not properties:
        return ""
    rendered = ", ".join(
        f"{escape_identifier(key)}: {value.get_cypher(env)}" for key, value in properties
    )
    return f" {{{rendered}}}"


class NodeElement:
    __slots__ = ("reference", "labels", "properties")

    def __init__(
        self,
        reference: Node,
        labels: Iterable[str] | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(reference, Node):
            raise PatternError(
                "Expected a Node",
                details=create_error_context(got=type(reference).__name__),
            )
        self.reference = reference
        if labels is None:
            self.labels = reference.labels
        else:
            self.labels = normalize_labels(labels)
        self.properties = _to_properties(properties)

    def get_cypher(self, env: Environment) -> str:
        label = env.label_for(self.reference)
        labels = "".join(f":{escape_identifier(name)}" for name in self.labels)
        return f"({label}{labels}{_render_properties(self.properties, env)})"


class RelationshipElement:
    __slots__ = ("reference", "type", "properties", "direction")

    def __init__(
        self,
        reference: Relationship,
        rel_type: str | None = None,
        properties: Mapping[str, Any] | None = None,
        direction: Direction | str = Direction.RIGHT,
    ) -> None:
        if not isinstance(reference, Relationship):
            raise PatternError(
                "Expected a Relationship",
                details=create_error_context(got=type(reference).__name__),
            )
        self.reference = reference
        self.type = reference.type if rel_type is None else rel_type
        self.properties = _to_properties(properties)
        self.direction = _to_direction(direction)

    def get_cypher(self, env: Environment) -> str:
        label = env.label_for(self.reference)
        rel_type = f":{escape_identifier(self.type)}" if self.type else ""
        body = f"[{label}{rel_type}{_render_properties(self.properties, env)}]"
        if self.direction is Direction.LEFT:
            return f"<-{body}-"
        if self.direction is Direction.RIGHT:
            return f"-{body}->"
        return f"-{body}-"


class Pattern:
    """A complete chain: starts and ends on a node.

    Args:
        node: The first node.
        labels: Labels for this occurrence; defaults to `node.labels`. Pass an
            empty list to render the node without labels.
        properties: Property equality constraints, rendered in insertion order.
    """

    __slots__ = ("_elements",)

    def __init__(
        self,
        node: Node,
        *,
        labels: Iterable[str] | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        self._elements: tuple[NodeElement | RelationshipElement, ...] = (
            NodeElement(node, labels, properties),
        )

    @classmethod
    def _from_elements(
        cls, elements: tuple[NodeElement | RelationshipElement, ...]
    ) -> Pattern:
        pattern = cls.__new__(cls)
        pattern._elements = elements
        return pattern

    @property
    def elements(self) -> tuple[NodeElement | RelationshipElement, ...]:
        return self._elements

    def related(
        self,
        relationship: Relationship | None = None,
        *,
        type: str | None = None,
        properties: Mapping[str, Any] | None = None,
        direction: Direction | str = Direction.RIGHT,
    ) -> PartialPattern:
        """Extend the chain with a relationship; finish it with `.to(node)`.

        A fresh anonymous `Relationship` is used when none is given.
        """
        element = RelationshipElement(
            relationship if relationship is not None else Relationship(),
            type,
            properties,
            direction,
        )
        return PartialPattern(self._elements, element)

    def get_cypher(self, env: Environment) -> str:
        return "".join(element.get_cypher(env) for element in self._elements)


class PartialPattern:
    """A chain waiting for its closing node. Not accepted by clauses."""

    __slots__ = ("_elements", "_pending")

    def __init__(
        self,
        elements: tuple[NodeElement | RelationshipElement, ...],
        pending: RelationshipElement,
    ) -> None:
        self._elements = elements
        self._pending = pending

    def to(
        self,
        node: Node,
        *,
        labels: Iterable[str] | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> Pattern:
        return Pattern._from_elements(
            (*self._elements, self._pending, NodeElement(node, labels, properties))
        )


def as_pattern(value: Node | Pattern) -> Pattern:
    """Accept a bare Node as a single-node pattern.

    Raises:
        PatternError: For a `PartialPattern` or anything that is not a pattern.
    """
    if isinstance(value, Pattern):
        return value
    if isinstance(value, Node):
        return Pattern(value)
    if isinstance(value, PartialPattern):
        raise PatternError("Pattern ends on a relationship; close it with .to(node)")
    raise PatternError(
        "Expected a Node or Pattern",
        details=create_error_context(got=type(value).__name__),
    )
