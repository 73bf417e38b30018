"""ResponsesFetcher: one authenticated GET against the form-submissions API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..correlation import CORRELATION_HEADER, get_correlation_id
from ..exceptions import UpstreamError
from ..models import PagedResult, PageRequest
from .query_string import UpstreamQueryBuilder

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.fillout.com/v1/api/forms/"
DEFAULT_SUBMISSIONS_PATH = "/submissions"


@dataclass(frozen=True)
class UpstreamConfig:
    """Connection settings for the form-submissions API.

    Attributes:
        api_key: Bearer token sent with every request.
        base_url: Prefix the form id is appended to.
        submissions_path: Suffix appended after the form id.
        timeout: Request timeout in seconds; ``None`` waits forever.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    submissions_path: str = DEFAULT_SUBMISSIONS_PATH
    timeout: float | None = 30.0

    def url_for(self, form_id: str) -> str:
        return f"{self.base_url}{quote(form_id, safe='')}{self.submissions_path}"


class ResponsesFetcher:
    """
    Fetch one page of submissions for a form.

    The upstream body is returned as a PagedResult without transformation.
    There are no retries: every failure is logged and raised as
    ``UpstreamError``.

    Example:
        ```python
        fetcher = ResponsesFetcher(UpstreamConfig(api_key="secret"))
        result = await fetcher.fetch("form-123", PageRequest(limit=20))
        ```
    """

    def __init__(
        self,
        config: UpstreamConfig,
        client: httpx.AsyncClient | None = None,
        query_builder: UpstreamQueryBuilder | None = None,
    ) -> None:
        """
        Initialize ResponsesFetcher.

        Args:
            config: Upstream connection settings.
            client: Shared AsyncClient; when omitted a client is opened per
                call using ``config.timeout``.
            query_builder: Custom PageRequest renderer (optional).
        """
        self.config = config
        self._client = client
        self._query_builder = query_builder or UpstreamQueryBuilder()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Accept": "application/json",
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_HEADER] = correlation_id
        return headers

    async def fetch(self, form_id: str, page: PageRequest) -> PagedResult:
        url = self.config.url_for(form_id)
        params = self._query_builder.build(page)
        if self._client is not None:
            response = await self._get(self._client, url, params)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await self._get(client, url, params)
        return self._decode(response, url)

    async def _get(
        self, client: httpx.AsyncClient, url: str, params: dict[str, str]
    ) -> httpx.Response:
        try:
            response = await client.get(url, params=params, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Upstream HTTP error: {status} - {url}")
            raise UpstreamError(
                f"Upstream returned HTTP {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach upstream {url}: {e!r}")
            raise UpstreamError(f"Upstream request failed: {e!r}") from e
        return response

    def _decode(self, response: httpx.Response, url: str) -> PagedResult:
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Upstream returned malformed JSON from {url}")
            raise UpstreamError("Upstream returned malformed JSON") from e
        if not isinstance(body, dict):
            logger.error(f"Upstream returned a {type(body).__name__} body from {url}")
            raise UpstreamError("Upstream returned an unexpected body")
        try:
            return PagedResult.model_validate(body)
        except PydanticValidationError as e:
            logger.error(f"Upstream body from {url} is not a response page: {e}")
            raise UpstreamError("Upstream returned an unexpected body") from e
