"""FastAPI dependencies for the proxy routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from ...service import FilteredResponsesService


def get_service(request: Request) -> FilteredResponsesService:
    """Return the service bound to the application at startup."""
    service: FilteredResponsesService = request.app.state.service
    return service
