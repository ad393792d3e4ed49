"""Core package initialization.

Submodules are imported explicitly by callers (`cypher_compose.core.environment`,
`cypher_compose.core.exceptions`, ...). Nothing is re-exported here because the
environment depends on the reference types, which in turn depend on the helpers
in this package.
"""
