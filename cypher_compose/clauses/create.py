# cypher_compose/clauses/create.py
from __future__ import annotations

from typing import TYPE_CHECKING

from cypher_compose.clauses.clause import PatternClause

if TYPE_CHECKING:
    from cypher_compose.core.environment import Environment


class Create(PatternClause):
    """`CREATE`, optionally followed by `SET` and a `RETURN` projection.

    Filtering, removal and deletion are not part of this clause's grammar and
    raise `UnsupportedCapabilityError` when requested.
    """

    CAPABILITIES = ("path", "set", "return")

    def get_cypher(self, env: Environment) -> str:
        path = self._compile_path(env)
        patterns = self._compile_patterns(env)
        return f"CREATE {path}{patterns}{self.compile_capabilities(env)}"
