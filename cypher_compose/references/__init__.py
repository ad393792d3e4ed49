"""Identity-bearing leaves of a query tree."""

from .param import Param
from .property import PropertyRef
from .reference import Node, Path, Reference, ReferenceKind, Relationship, Variable

__all__ = [
    "Node",
    "Param",
    "Path",
    "PropertyRef",
    "Reference",
    "ReferenceKind",
    "Relationship",
    "Variable",
]
