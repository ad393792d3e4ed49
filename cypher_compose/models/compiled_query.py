# cypher_compose/models/compiled_query.py
"""Result of compiling a query tree."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CompiledQuery(BaseModel):
    """Cypher text plus the parameter values it references.

    Every `$key` placeholder in `text` has exactly one entry in `params`, and
    `params` holds nothing else.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    params: dict[str, Any] = Field(default_factory=dict)

    def as_tuple(self) -> tuple[str, dict[str, Any]]:
        """Return `(text, params)`, the shape driver `run()` calls expect."""
        return self.text, dict(self.params)
