"""FilteredResponsesService: fetch, filter, and re-paginate one request."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from .filtering.exceptions import FilterParseError
from .filtering.pagination import UPSTREAM_PAGE_SIZE, PageRequestParser
from .filtering.syntax import parse_filter_expression

if TYPE_CHECKING:
    from .filtering.engine import ResponseFilter
    from .filtering.expression import FilterExpression
    from .models import PagedResult
    from .upstream.fetcher import ResponsesFetcher

logger = logging.getLogger(__name__)


class FilterErrorPolicy(str, Enum):
    """What to do with a malformed ``filters`` parameter.

    DEGRADE logs and serves the request unfiltered; REJECT raises
    FilterParseError to the caller.

    Filters are parsed before anything is fetched, so a degraded request
    is fetched with the client's own ``limit``/``offset`` and the upstream
    page comes back verbatim. The filtered path's 150-wide page is never
    returned unsliced to a client that asked for a smaller one.
    """

    DEGRADE = "degrade"
    REJECT = "reject"


class FilteredResponsesService:
    """Compose fetcher and filter engine for ``GET /{formId}/filteredResponses``.

    Without a filter the upstream page is fetched with the client's own
    pagination and returned verbatim. With a filter the largest upstream
    page is fetched, filtered, then re-paginated for the client.
    UpstreamError always propagates.
    """

    def __init__(
        self,
        fetcher: ResponsesFetcher,
        response_filter: ResponseFilter,
        *,
        page_parser: PageRequestParser | None = None,
        error_policy: FilterErrorPolicy = FilterErrorPolicy.DEGRADE,
    ) -> None:
        self._fetcher = fetcher
        self._filter = response_filter
        self._page_parser = page_parser or PageRequestParser()
        self.error_policy = error_policy

    async def get_filtered_responses(
        self, form_id: str, query_params: Mapping[str, Any]
    ) -> PagedResult:
        page = self._page_parser.parse(query_params)
        expression = self._parse_filters(query_params.get("filters"))
        if expression is None:
            return await self._fetcher.fetch(form_id, page)

        candidates = await self._fetcher.fetch(
            form_id, page.model_copy(update={"limit": UPSTREAM_PAGE_SIZE})
        )
        result = self._filter.apply(candidates, expression, page)
        logger.debug(
            f"Filtered form {form_id}: {len(candidates.responses)} candidates, "
            f"{result.total_responses} matched, {len(result.responses)} returned"
        )
        return result

    def _parse_filters(self, raw: Any) -> FilterExpression | None:
        if not raw:
            return None
        try:
            return parse_filter_expression(raw)
        except FilterParseError as e:
            if self.error_policy is FilterErrorPolicy.REJECT:
                raise
            logger.warning(f"Ignoring malformed filters ({e.path}): {e.message}")
            return None
