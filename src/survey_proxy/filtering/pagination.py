"""PageRequestParser and post-filter re-pagination helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeVar

from ..models import DEFAULT_LIMIT, DEFAULT_STATUS, PageRequest, SortOrder

T = TypeVar("T")

# Largest page the upstream API serves; filtered requests always fetch this many.
UPSTREAM_PAGE_SIZE = 150


class PaginationMode(str, Enum):
    """When filtered results are re-sliced to the client's window.

    LEGACY slices only when ``limit != 150 and offset != 0``; a limit-only
    request with offset 0 gets every surviving response. ALWAYS slices
    every filtered result to ``[offset, offset + limit)``.
    """

    LEGACY = "legacy"
    ALWAYS = "always"


class PageRequestParser:
    """Normalize raw query params into a PageRequest, failing closed to defaults."""

    def parse(
        self,
        query_params: Mapping[str, Any],
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int | None = None,
    ) -> PageRequest:
        limit = self._int_param(query_params.get("limit"))
        if limit is None or limit < 1:
            limit = default_limit
        if max_limit is not None:
            limit = min(max_limit, limit)
        offset = self._int_param(query_params.get("offset"))
        if offset is None or offset < 0:
            offset = 0
        return PageRequest(
            limit=limit,
            offset=offset,
            after_date=query_params.get("afterDate") or "",
            before_date=query_params.get("beforeDate") or "",
            status=query_params.get("status") or DEFAULT_STATUS,
            include_edit_link=query_params.get("includeEditLink") == "true",
            sort=SortOrder.DESC if query_params.get("sort") == "desc" else SortOrder.ASC,
        )

    def _int_param(self, v: Any) -> int | None:
        if v is None:
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None


def page_count(offset: int, limit: int) -> int:
    """Approximate current page number: ``ceil(offset / limit) + 1``."""
    if limit < 1:
        raise ValueError(f"limit must be positive, got {limit}")
    return math.ceil(offset / limit) + 1


def should_slice(page: PageRequest, mode: PaginationMode = PaginationMode.LEGACY) -> bool:
    if mode is PaginationMode.ALWAYS:
        return True
    return page.limit != UPSTREAM_PAGE_SIZE and page.offset != 0


def paginate(
    items: Sequence[T],
    page: PageRequest,
    mode: PaginationMode = PaginationMode.LEGACY,
) -> list[T]:
    """Return the client's window of ``items``, or all of them when no slice applies."""
    if not should_slice(page, mode):
        return list(items)
    return list(items[page.offset : page.offset + page.limit])
