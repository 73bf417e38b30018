"""Tests for Settings loading."""

from __future__ import annotations

import pytest

from survey_proxy.config import Settings
from survey_proxy.filtering import MatchMode, PaginationMode
from survey_proxy.service import FilterErrorPolicy
from survey_proxy.upstream import DEFAULT_BASE_URL


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("API_KEY", "BASE_URL", "PORT", "FILTER_MATCH_MODE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.port == 3000
    assert settings.upstream_timeout == 30.0
    assert settings.filter_match_mode is MatchMode.LEGACY
    assert settings.pagination_mode is PaginationMode.LEGACY
    assert settings.filter_error_policy is FilterErrorPolicy.DEGRADE


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_KEY", "env-key")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FILTER_MATCH_MODE", "strict")
    monkeypatch.setenv("PAGINATION_MODE", "always")
    monkeypatch.setenv("FILTER_ERROR_POLICY", "reject")
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.api_key == "env-key"
    assert settings.port == 8080
    assert settings.filter_match_mode is MatchMode.STRICT
    assert settings.pagination_mode is PaginationMode.ALWAYS
    assert settings.filter_error_policy is FilterErrorPolicy.REJECT
    assert settings.upstream_timeout == 2.5


def test_upstream_config() -> None:
    settings = Settings(
        api_key="k",
        base_url="https://upstream.test/forms/",
        submissions_path="/subs",
        upstream_timeout=5,
        _env_file=None,
    )
    config = settings.upstream_config()

    assert config.api_key == "k"
    assert config.timeout == 5
    assert config.url_for("f1") == "https://upstream.test/forms/f1/subs"


def test_configure_logging_sets_level() -> None:
    import logging

    from survey_proxy.logging_setup import configure_logging

    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
