"""Filtering proxy for paginated survey responses from a form-submissions API."""

from __future__ import annotations

from .exceptions import (
    InfrastructureError,
    SurveyProxyError,
    UpstreamError,
    ValidationError,
)
from .filtering import (
    FilterClause,
    FilterExpression,
    FilterParseError,
    MatchMode,
    PaginationMode,
    ResponseFilter,
    apply_filter,
    build_default_registry,
)
from .models import Answer, PagedResult, PageRequest, SortOrder, SurveyResponse
from .service import FilteredResponsesService, FilterErrorPolicy
from .upstream import ResponsesFetcher, UpstreamConfig

__all__ = [
    "Answer",
    "FilterClause",
    "FilterErrorPolicy",
    "FilterExpression",
    "FilterParseError",
    "FilteredResponsesService",
    "InfrastructureError",
    "MatchMode",
    "PageRequest",
    "PagedResult",
    "PaginationMode",
    "ResponseFilter",
    "ResponsesFetcher",
    "SortOrder",
    "SurveyProxyError",
    "SurveyResponse",
    "UpstreamConfig",
    "UpstreamError",
    "ValidationError",
    "apply_filter",
    "build_default_registry",
]
