"""Exception hierarchy for survey-proxy.

All exceptions inherit from ``SurveyProxyError`` and the ones that reach
the HTTP layer provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class SurveyProxyError(Exception):
    """Root exception for the entire survey-proxy service."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(SurveyProxyError):
    """Client-supplied input failed structural validation."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class InfrastructureError(SurveyProxyError):
    """Base class for all infrastructure-related errors."""


class UpstreamError(InfrastructureError):
    """The form-submissions API could not be reached or answered badly.

    ``status_code`` is the upstream HTTP status for non-2xx answers and
    ``None`` for transport failures and undecodable bodies.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UPSTREAM_ERROR",
            "message": self.message,
            "status_code": self.status_code,
        }
