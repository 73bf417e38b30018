"""
Application settings loaded from environment variables and ``.env``.

Usage:
    from survey_proxy.config import get_settings

    settings = get_settings()
    fetcher = ResponsesFetcher(settings.upstream_config())
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .filtering.engine import MatchMode
from .filtering.pagination import PaginationMode
from .service import FilterErrorPolicy
from .upstream.fetcher import DEFAULT_BASE_URL, DEFAULT_SUBMISSIONS_PATH, UpstreamConfig


class Settings(BaseSettings):
    """Settings for the proxy process. Env var names are case-insensitive."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Upstream API
    api_key: str = Field(default="")
    base_url: str = Field(default=DEFAULT_BASE_URL)
    submissions_path: str = Field(default=DEFAULT_SUBMISSIONS_PATH)
    upstream_timeout: float | None = Field(default=30.0)

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # Filter behaviour
    filter_match_mode: MatchMode = Field(default=MatchMode.LEGACY)
    pagination_mode: PaginationMode = Field(default=PaginationMode.LEGACY)
    filter_error_policy: FilterErrorPolicy = Field(default=FilterErrorPolicy.DEGRADE)

    # Logging
    log_level: str = Field(default="INFO")

    def upstream_config(self) -> UpstreamConfig:
        return UpstreamConfig(
            api_key=self.api_key,
            base_url=self.base_url,
            submissions_path=self.submissions_path,
            timeout=self.upstream_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
