"""Client for the upstream form-submissions API."""

from __future__ import annotations

from .fetcher import (
    DEFAULT_BASE_URL,
    DEFAULT_SUBMISSIONS_PATH,
    ResponsesFetcher,
    UpstreamConfig,
)
from .query_string import UpstreamQueryBuilder

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_SUBMISSIONS_PATH",
    "ResponsesFetcher",
    "UpstreamConfig",
    "UpstreamQueryBuilder",
]
