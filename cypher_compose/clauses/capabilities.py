# cypher_compose/clauses/capabilities.py
"""Optional grammar fragments a clause can carry.

A capability is three things: the state a builder call populates, the renderer
that turns that state into one fragment of text, and a slot name. Clause
variants list the slots they support in `CAPABILITIES`, in the order the
fragments are emitted, and create capability objects lazily the first time a
builder touches a slot. A slot that was never touched emits nothing at all.

Merge rules when a builder is called more than once:
- `where`: predicates are conjoined with AND (`or_where` disjoins);
- `set`, `remove`, `delete`: entries are appended;
- `with`, `return`: the column list is replaced, ordering is kept;
- ordering (`order_by`, `skip`, `limit`) belongs to a projection: sort items
  are appended, skip/limit are replaced. It renders directly under the
  `WITH`/`RETURN` line it belongs to and never on its own.
- `path`: the bound path is replaced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, ClassVar

from cypher_compose.core.exceptions import ExpressionError, PatternError, create_error_context
from cypher_compose.core.utils import CypherCompilable
from cypher_compose.expressions.operations import BooleanOp, and_, as_expression, or_
from cypher_compose.expressions.projection import (
    ProjectionColumn,
    SortItem,
    to_sort_item,
)
from cypher_compose.references.param import Param
from cypher_compose.references.property import PropertyRef
from cypher_compose.references.reference import Path, Reference

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


class Capability(ABC):
    """State plus renderer for one optional clause fragment."""

    name: ClassVar[str]

    @abstractmethod
    def get_cypher(self, env: Environment) -> str:
        """Render the fragment, or return "" when there is nothing to emit."""


class PathBinding(Capability):
    name = "path"

    def __init__(self) -> None:
        self.path: Path | None = None

    def bind(self, path: Path) -> None:
        if not isinstance(path, Path):
            raise PatternError(
                "Only a Path can be bound to a pattern",
                details=create_error_context(got=type(path).__name__),
            )
        self.path = path

    def get_cypher(self, env: Environment) -> str:
        if self.path is None:
            return ""
        return f"{env.label_for(self.path)} = "


class Filter(Capability):
    name = "where"

    def __init__(self) -> None:
        self.predicate: CypherCompilable | None = None

    def conjoin(self, predicate: Any) -> None:
        predicate = as_expression(predicate)
        current = self.predicate
        if current is None:
            self.predicate = predicate
        elif isinstance(current, BooleanOp) and current.operator == "AND":
            self.predicate = BooleanOp("AND", (*current.operands, predicate))
        else:
            self.predicate = and_(current, predicate)

    def disjoin(self, predicate: Any) -> None:
        predicate = as_expression(predicate)
        if self.predicate is None:
            self.predicate = predicate
        else:
            self.predicate = or_(self.predicate, predicate)

    def get_cypher(self, env: Environment) -> str:
        if self.predicate is None:
            return ""
        return f"WHERE {self.predicate.get_cypher(env)}"


class Mutation(Capability):
    name = "set"

    def __init__(self) -> None:
        self.assignments: list[tuple[PropertyRef, CypherCompilable]] = []

    def add(self, assignments: Iterable[tuple[PropertyRef, Any]]) -> None:
        for assignment in assignments:
            if not isinstance(assignment, tuple) or len(assignment) != 2:
                raise ExpressionError(
                    "SET entries must be (property, value) pairs",
                    details=create_error_context(got=repr(assignment)),
                )
            target, value = assignment
            if not isinstance(target, PropertyRef):
                raise ExpressionError(
                    "SET targets must be property references",
                    details=create_error_context(got=type(target).__name__),
                )
            self.assignments.append((target, as_expression(value)))

    def get_cypher(self, env: Environment) -> str:
        if not self.assignments:
            return ""
        entries = ", ".join(
            f"{target.get_cypher(env)} = {value.get_cypher(env)}"
            for target, value in self.assignments
        )
        return f"SET {entries}"


class Removal(Capability):
    name = "remove"

    def __init__(self) -> None:
        self.properties: list[PropertyRef] = []

    def add(self, properties: Iterable[PropertyRef]) -> None:
        for prop in properties:
            if not isinstance(prop, PropertyRef):
                raise ExpressionError(
                    "REMOVE takes property references",
                    details=create_error_context(got=type(prop).__name__),
                )
            self.properties.append(prop)

    def get_cypher(self, env: Environment) -> str:
        if not self.properties:
            return ""
        return "REMOVE " + ", ".join(prop.get_cypher(env) for prop in self.properties)


class Deletion(Capability):
    name = "delete"

    def __init__(self) -> None:
        self.references: list[Reference] = []
        self.detach = False

    def add(self, references: Iterable[Reference], detach: bool = False) -> None:
        for reference in references:
            if not isinstance(reference, Reference):
                raise ExpressionError(
                    "DELETE takes node, relationship, path or variable references",
                    details=create_error_context(got=type(reference).__name__),
                )
            self.references.append(reference)
        # DETACH applies to the whole fragment once any call asks for it
        self.detach = self.detach or detach

    def get_cypher(self, env: Environment) -> str:
        if not self.references:
            return ""
        keyword = "DETACH DELETE" if self.detach else "DELETE"
        return f"{keyword} " + ", ".join(ref.get_cypher(env) for ref in self.references)


def _as_count(value: int | Param, role: str) -> Param:
    if isinstance(value, Param):
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ExpressionError(
            f"{role} must be a non-negative integer or a Param",
            details=create_error_context(got=repr(value)),
        )
    return Param(value)


class Ordering:
    """ORDER BY / SKIP / LIMIT of a projection body. Each present part is its own line."""

    def __init__(self) -> None:
        self.sort_items: list[SortItem] = []
        self.skip: Param | None = None
        self.limit: Param | None = None

    def add_sort_items(self, items: Iterable[Any]) -> None:
        self.sort_items.extend(to_sort_item(item) for item in items)

    def set_skip(self, value: int | Param) -> None:
        self.skip = _as_count(value, "SKIP")

    def set_limit(self, value: int | Param) -> None:
        self.limit = _as_count(value, "LIMIT")

    def lines(self, env: Environment) -> list[str]:
        lines = []
        if self.sort_items:
            lines.append(
                "ORDER BY " + ", ".join(item.get_cypher(env) for item in self.sort_items)
            )
        if self.skip is not None:
            lines.append(f"SKIP {self.skip.get_cypher(env)}")
        if self.limit is not None:
            lines.append(f"LIMIT {self.limit.get_cypher(env)}")
        return lines


class Projection(Capability):
    """`RETURN`/`WITH` columns followed by the ordering of their body.

    Ordering only ever renders behind a non-empty column list.
    """

    keyword: ClassVar[str]

    def __init__(self) -> None:
        self.columns: list[ProjectionColumn] = []
        self.distinct = False
        self.ordering = Ordering()

    def replace(self, columns: list[ProjectionColumn], distinct: bool = False) -> None:
        self.columns = columns
        self.distinct = distinct

    def get_cypher(self, env: Environment) -> str:
        if not self.columns:
            return ""
        distinct = " DISTINCT" if self.distinct else ""
        rendered = ", ".join(column.get_cypher(env) for column in self.columns)
        head = f"{self.keyword}{distinct} {rendered}"
        return env.separator.join([head, *self.ordering.lines(env)])


class ReturnProjection(Projection):
    name = "return"
    keyword = "RETURN"


class WithProjection(Projection):
    name = "with"
    keyword = "WITH"
