"""Shared fixtures for survey-proxy tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from survey_proxy.filtering import ResponseFilter, build_default_registry
from survey_proxy.models import PagedResult


def _response(submission_id: str, answers: dict[str, Any]) -> dict[str, Any]:
    return {
        "submissionId": submission_id,
        "submissionTime": "2024-02-27T19:37:08.813Z",
        "lastUpdatedAt": "2024-02-27T19:37:08.813Z",
        "questions": [
            {"id": qid, "name": qid.upper(), "type": "ShortAnswer", "value": value}
            for qid, value in answers.items()
        ],
        "calculations": [],
        "urlParameters": [],
    }


@pytest.fixture
def registry():
    """Default condition registry."""
    return build_default_registry()


@pytest.fixture
def response_filter(registry) -> ResponseFilter:
    return ResponseFilter(registry)


@pytest.fixture
def make_response() -> Callable[..., dict[str, Any]]:
    """Build one upstream response dict from ``{question_id: value}``."""
    return _response


@pytest.fixture
def make_page() -> Callable[..., PagedResult]:
    """Build a PagedResult from a list of ``{question_id: value}`` answer maps."""

    def _make(answer_sets: list[dict[str, Any]], **extra: Any) -> PagedResult:
        body = {
            "responses": [_response(f"sub-{i}", a) for i, a in enumerate(answer_sets)],
            "totalResponses": len(answer_sets),
            "pageCount": 1,
            **extra,
        }
        return PagedResult.model_validate(body)

    return _make
