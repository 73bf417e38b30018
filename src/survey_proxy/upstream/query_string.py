"""UpstreamQueryBuilder: PageRequest -> upstream query parameters."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from ..models import PageRequest


class UpstreamQueryBuilder:
    """Render a PageRequest under the upstream parameter names.

    Empty-string values (unset optional filters such as ``afterDate``) are
    dropped so they never reach the upstream query.
    """

    def build(self, page: PageRequest) -> dict[str, str]:
        raw = page.model_dump(mode="json", by_alias=True)
        params: dict[str, str] = {}
        for key, value in raw.items():
            if value == "":
                continue
            params[key] = self._render(value)
        return params

    def build_query_string(self, page: PageRequest) -> str:
        params = self.build(page)
        return urlencode(params) if params else ""

    @staticmethod
    def _render(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
