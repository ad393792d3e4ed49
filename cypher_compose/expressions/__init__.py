"""Expression leaves handed to the compiler: operators, functions, projections."""

from .functions import CypherFunction, coalesce, collect, count, element_id
from .operations import (
    BooleanOp,
    ComparisonOp,
    NotOp,
    and_,
    as_expression,
    contains,
    ends_with,
    eq,
    gt,
    gte,
    in_,
    is_not_null,
    is_null,
    lt,
    lte,
    neq,
    not_,
    or_,
    starts_with,
)
from .projection import STAR, ProjectionColumn, SortItem, to_column, to_columns, to_sort_item

__all__ = [
    "BooleanOp",
    "ComparisonOp",
    "CypherFunction",
    "NotOp",
    "ProjectionColumn",
    "STAR",
    "SortItem",
    "and_",
    "as_expression",
    "coalesce",
    "collect",
    "contains",
    "count",
    "element_id",
    "ends_with",
    "eq",
    "gt",
    "gte",
    "in_",
    "is_not_null",
    "is_null",
    "lt",
    "lte",
    "neq",
    "not_",
    "or_",
    "starts_with",
    "to_column",
    "to_columns",
    "to_sort_item",
]
