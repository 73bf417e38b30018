"""Response filtering: filter parsing, condition evaluation, re-pagination."""

from __future__ import annotations

from .comparisons import (
    DoesNotEqualOperator,
    EqualsOperator,
    GreaterThanOperator,
    LessThanOperator,
    build_default_registry,
)
from .conditions import FilterCondition
from .engine import MatchMode, ResponseFilter, apply_filter
from .evaluator import ConditionOperator, ConditionRegistry
from .exceptions import FilterParseError
from .expression import FilterClause, FilterExpression
from .pagination import (
    UPSTREAM_PAGE_SIZE,
    PageRequestParser,
    PaginationMode,
    page_count,
    paginate,
)
from .syntax import JsonFilterSyntax, parse_filter_expression
from .values import ValueKind, kind_of

__all__ = [
    "ConditionOperator",
    "ConditionRegistry",
    "DoesNotEqualOperator",
    "EqualsOperator",
    "FilterClause",
    "FilterCondition",
    "FilterExpression",
    "FilterParseError",
    "GreaterThanOperator",
    "JsonFilterSyntax",
    "LessThanOperator",
    "MatchMode",
    "PageRequestParser",
    "PaginationMode",
    "ResponseFilter",
    "UPSTREAM_PAGE_SIZE",
    "ValueKind",
    "apply_filter",
    "build_default_registry",
    "kind_of",
    "page_count",
    "paginate",
    "parse_filter_expression",
]
