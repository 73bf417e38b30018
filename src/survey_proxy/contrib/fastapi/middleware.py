"""RequestLoggingMiddleware: one JSON log entry per request with correlation context."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any, cast

from starlette.middleware.base import BaseHTTPMiddleware

from ...correlation import (
    CORRELATION_HEADER,
    generate_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

_log = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id and logs method, path, status, outcome, duration.

    The id is taken from the ``X-Correlation-ID`` request header or
    generated, and echoed back on the response. Errors raised by the
    application are logged with outcome ``error`` and re-raised.
    """

    def __init__(self, app: Any, *, logger: logging.Logger | None = None) -> None:
        super().__init__(app)
        self._log = logger or _log

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)
        start = time.monotonic()
        status: int | None = None
        outcome = "success"
        try:
            response = cast("Response", await call_next(request))
            status = response.status_code
            if status >= 500:
                outcome = "error"
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        except Exception:  # noqa: BLE001
            outcome = "error"
            raise
        finally:
            entry = {
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "outcome": outcome,
                "duration_ms": round((time.monotonic() - start) * 1000, 2),
                "correlation_id": correlation_id,
            }
            self._log.info(json.dumps(entry))
            set_correlation_id(None)
