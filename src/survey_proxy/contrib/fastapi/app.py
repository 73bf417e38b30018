"""FastAPI application: route registration, lifespan, error mapping."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from ...config import Settings, get_settings
from ...exceptions import UpstreamError, ValidationError
from ...filtering.comparisons import build_default_registry
from ...filtering.engine import ResponseFilter
from ...service import FilteredResponsesService
from ...upstream.fetcher import ResponsesFetcher
from .dependencies import get_service
from .middleware import RequestLoggingMiddleware

if TYPE_CHECKING:
    from ...models import PagedResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{form_id}/filteredResponses")
async def filtered_responses(
    form_id: str,
    request: Request,
    service: FilteredResponsesService = Depends(get_service),
) -> JSONResponse:
    """Fetch a form's submissions, filtered and paginated per the query string.

    Query parameters are read raw so malformed ``limit``/``offset`` fall
    back to defaults instead of failing validation.
    """
    result: PagedResult = await service.get_filtered_responses(
        form_id, dict(request.query_params)
    )
    return JSONResponse(result.to_payload())


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}


def build_service(settings: Settings, client: httpx.AsyncClient | None = None) -> FilteredResponsesService:
    """Wire fetcher and filter engine from settings."""
    fetcher = ResponsesFetcher(settings.upstream_config(), client=client)
    response_filter = ResponseFilter(
        build_default_registry(),
        match_mode=settings.filter_match_mode,
        pagination_mode=settings.pagination_mode,
    )
    return FilteredResponsesService(
        fetcher,
        response_filter,
        error_policy=settings.filter_error_policy,
    )


async def _upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    return JSONResponse(status_code=502, content=exc.to_dict())


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content=exc.to_dict())


def create_app(
    settings: Settings | None = None,
    *,
    service: FilteredResponsesService | None = None,
) -> FastAPI:
    """
    Build the proxy application.

    Args:
        settings: Process settings; defaults to ``get_settings()``.
        service: Pre-built service (tests); when omitted one is wired at
            startup around a shared ``httpx.AsyncClient``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if service is not None:
            app.state.service = service
            yield
        else:
            async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
                app.state.service = build_service(settings, client)
                yield

    app = FastAPI(title="Survey Responses Filter Proxy", lifespan=lifespan)
    if service is not None:
        app.state.service = service
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(UpstreamError, _upstream_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.include_router(router)
    return app
