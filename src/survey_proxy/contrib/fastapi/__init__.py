"""FastAPI integration for survey-proxy."""

from .app import build_service, create_app, router
from .dependencies import get_service
from .middleware import RequestLoggingMiddleware

__all__: list[str] = [
    "RequestLoggingMiddleware",
    "build_service",
    "create_app",
    "get_service",
    "router",
]
