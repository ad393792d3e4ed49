# cypher_compose/clauses/clause.py
"""Base clause and the capability manifest mechanism.

Every clause variant declares `CAPABILITIES`, the ordered tuple of optional
fragment slots it supports (see [`capabilities`](capabilities.py)). The builder
methods live here once for all variants; each of them first checks the
manifest, so asking a `Create` for `.where(...)` fails at that call with
`UnsupportedCapabilityError` instead of producing text the grammar rejects.

Notes:
    Builders mutate the clause and return it for chaining. Build the tree
    completely before compiling it; compiling while another thread is still
    calling builders on the same clause is not supported.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar, cast

from cypher_compose.clauses.capabilities import (
    Capability,
    Deletion,
    Filter,
    Mutation,
    Ordering,
    PathBinding,
    Projection,
    Removal,
    ReturnProjection,
    WithProjection,
)
from cypher_compose.core.exceptions import (
    ExpressionError,
    PatternError,
    UnsupportedCapabilityError,
    create_error_context,
)
from cypher_compose.core.utils import compile_if_exists
from cypher_compose.expressions.projection import to_columns
from cypher_compose.pattern.pattern import Pattern, as_pattern

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment
    from cypher_compose.expressions.projection import ProjectionInput
    from cypher_compose.models.compiled_query import CompiledQuery
    from cypher_compose.references.param import Param
    from cypher_compose.references.property import PropertyRef
    from cypher_compose.references.reference import Node, Path, Reference

ClauseT = TypeVar("ClauseT", bound="Clause")
CapabilityT = TypeVar("CapabilityT", bound=Capability)


class Clause(ABC):
    """A single clause with a mandatory body and optional capabilities."""

    CAPABILITIES: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._capabilities: dict[str, Capability] = {}

    @classmethod
    def supports(cls, name: str) -> bool:
        return name in cls.CAPABILITIES

    @property
    def populated_capabilities(self) -> tuple[str, ...]:
        """Slots that builders have touched, in manifest order."""
        return tuple(name for name in self.CAPABILITIES if name in self._capabilities)

    def _check_supported(self, name: str) -> None:
        if name not in self.CAPABILITIES:
            raise UnsupportedCapabilityError(
                f"{type(self).__name__} does not support {name!r}",
                details=create_error_context(
                    clause=type(self).__name__,
                    capability=name,
                    supported=list(self.CAPABILITIES),
                ),
            )

    def _capability(self, kind: type[CapabilityT]) -> CapabilityT:
        """Return the clause's `kind` capability, creating it on first use."""
        self._check_supported(kind.name)
        capability = self._capabilities.get(kind.name)
        if capability is None:
            capability = kind()
            self._capabilities[kind.name] = capability
        return cast(CapabilityT, capability)

    def _ordering(self) -> Ordering:
        """Ordering of the projection that ORDER BY / SKIP / LIMIT attach to.

        That is the `RETURN` projection when present, otherwise `WITH`.

        Raises:
            UnsupportedCapabilityError: If no projection has been set yet.
        """
        for kind in (ReturnProjection, WithProjection):
            projection = self._capabilities.get(kind.name)
            if isinstance(projection, Projection) and projection.columns:
                return projection.ordering
        raise UnsupportedCapabilityError(
            "ORDER BY, SKIP and LIMIT follow a WITH or RETURN projection; "
            "call return_() or with_() first",
            details=create_error_context(clause=type(self).__name__, capability="order"),
        )

    def compile_capabilities(self, env: Environment) -> str:
        """Render every populated fragment after the clause body, in manifest order.

        The path binding is excluded; it belongs in front of the pattern and is
        emitted by `_compile_path`.
        """
        parts = []
        for name in self.CAPABILITIES:
            if name == PathBinding.name:
                continue
            parts.append(
                compile_if_exists(self._capabilities.get(name), env, prefix=env.separator)
            )
        return "".join(parts)

    def _compile_path(self, env: Environment) -> str:
        return compile_if_exists(self._capabilities.get(PathBinding.name), env)

    # -- builders -------------------------------------------------------------

    def assign_to_path(self: ClauseT, path: Path) -> ClauseT:
        """Bind the clause's pattern to `path`: `MATCH p0 = (...)`."""
        self._capability(PathBinding).bind(path)
        return self

    def where(self: ClauseT, predicate: Any) -> ClauseT:
        """Add a predicate. Repeated calls are joined with AND."""
        self._capability(Filter).conjoin(predicate)
        return self

    def and_where(self: ClauseT, predicate: Any) -> ClauseT:
        return self.where(predicate)

    def or_where(self: ClauseT, predicate: Any) -> ClauseT:
        """Join `predicate` to the existing filter with OR."""
        self._capability(Filter).disjoin(predicate)
        return self

    def set(self: ClauseT, *assignments: tuple[PropertyRef, Any]) -> ClauseT:
        """Add `SET` entries given as `(node.property("x"), value)` pairs.

        Plain values are sent as parameters.
        """
        self._capability(Mutation).add(assignments)
        return self

    def remove(self: ClauseT, *properties: PropertyRef) -> ClauseT:
        self._capability(Removal).add(properties)
        return self

    def delete(self: ClauseT, *references: Reference) -> ClauseT:
        self._capability(Deletion).add(references)
        return self

    def detach_delete(self: ClauseT, *references: Reference) -> ClauseT:
        self._capability(Deletion).add(references, detach=True)
        return self

    def with_(self: ClauseT, *columns: ProjectionInput, distinct: bool = False) -> ClauseT:
        """Set the `WITH` projection, replacing any previous one."""
        return self._project(WithProjection, columns, distinct)

    def return_(self: ClauseT, *columns: ProjectionInput, distinct: bool = False) -> ClauseT:
        """Set the `RETURN` projection, replacing any previous one.

        Columns are expressions, `(expression, alias)` pairs or `"*"`.
        """
        return self._project(ReturnProjection, columns, distinct)

    def _project(
        self: ClauseT,
        kind: type[Projection],
        columns: tuple[ProjectionInput, ...],
        distinct: bool,
    ) -> ClauseT:
        self._check_supported(kind.name)
        if not columns:
            raise ExpressionError(f"{kind.keyword} needs at least one column")
        normalized = to_columns(columns)
        self._capability(kind).replace(normalized, distinct)
        return self

    def order_by(self: ClauseT, *items: Any) -> ClauseT:
        """Append sort items: expressions or `(expression, "ASC" | "DESC")` pairs.

        Call after `return_()`/`with_()`; the items sort that projection.
        """
        self._ordering().add_sort_items(items)
        return self

    def skip(self: ClauseT, value: int | Param) -> ClauseT:
        self._ordering().set_skip(value)
        return self

    def limit(self: ClauseT, value: int | Param) -> ClauseT:
        self._ordering().set_limit(value)
        return self

    # -- compilation ----------------------------------------------------------

    @abstractmethod
    def get_cypher(self, env: Environment) -> str:
        """Render the clause and its populated capabilities."""

    def build(self) -> CompiledQuery:
        """Compile this clause on its own, with a fresh Environment."""
        from cypher_compose.statement import build

        return build(self)


class PatternClause(Clause):
    """A clause whose body is one or more comma-separated patterns."""

    def __init__(self, *patterns: Node | Pattern) -> None:
        super().__init__()
        if not patterns:
            raise PatternError(f"{type(self).__name__} needs at least one pattern")
        self._patterns = tuple(as_pattern(pattern) for pattern in patterns)

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._patterns

    def assign_to_path(self, path: Path) -> PatternClause:
        if self.supports(PathBinding.name) and len(self._patterns) > 1:
            raise PatternError(
                "A path can only be bound to a single pattern",
                details=create_error_context(patterns=len(self._patterns)),
            )
        return super().assign_to_path(path)

    def _compile_patterns(self, env: Environment) -> str:
        return ", ".join(pattern.get_cypher(env) for pattern in self._patterns)
