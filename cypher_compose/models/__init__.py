# cypher_compose/models/__init__.py
from cypher_compose.models.compiled_query import CompiledQuery

__all__ = ["CompiledQuery"]
