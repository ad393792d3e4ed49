# cypher_compose/core/exceptions.py
"""Define standardized exception types for cypher_compose.

Every error is a construction-time contract violation raised at the offending
call. Compilation of a well-formed tree does not raise, so nothing here is
meant to be retried: callers fix how the tree is built instead.
"""

from typing import Any


class CypherComposeError(Exception):
    """Base exception for all cypher_compose errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ConstructionError(CypherComposeError):
    """A query tree was assembled in a way its building blocks do not allow."""


class UnionArityError(ConstructionError):
    """Raised when a Union is given fewer than two branches."""


class UnsupportedCapabilityError(ConstructionError):
    """Raised when a clause is asked for a fragment its manifest does not declare."""


class PatternError(ConstructionError):
    """Raised for malformed pattern chains (bad direction, wrong element kind)."""


class InvalidIdentifierError(ConstructionError):
    """Raised when a caller-supplied prefix or alias is not a valid identifier."""


class ExpressionError(ConstructionError):
    """Raised when an expression is built from unusable operands."""


def create_error_context(**kwargs: Any) -> dict[str, Any]:
    """Build a context dictionary for structured errors.

    Args:
        **kwargs: Key-value pairs to include.

    Returns:
        A dictionary containing only keys whose values are not `None`.
    """
    return {k: v for k, v in kwargs.items() if v is not None}
