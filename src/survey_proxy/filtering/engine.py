"""ResponseFilter: evaluate a filter expression over a page of responses.

Two match modes are supported:

``MatchMode.LEGACY`` (default)
    Every answer is tested against every clause and is kept when it
    satisfies *at least one* of them. A response survives when the number
    of kept answers equals the number of clauses, and it is returned with
    only those answers. Two answers satisfying the same clause can stand
    in for a clause nobody satisfied, so this is looser than a real AND.

``MatchMode.STRICT``
    A response survives when every clause is satisfied by some answer,
    each clause counted once. Answers are returned untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from ..models import Answer, PagedResult, PageRequest, SurveyResponse
from .comparisons import build_default_registry
from .evaluator import ConditionRegistry
from .expression import FilterClause, FilterExpression
from .pagination import PaginationMode, page_count, paginate
from .syntax import parse_filter_expression


class MatchMode(str, Enum):
    LEGACY = "legacy"
    STRICT = "strict"


class ResponseFilter:
    """Filter and re-paginate a fetched PagedResult. Never mutates its inputs."""

    def __init__(
        self,
        registry: ConditionRegistry,
        *,
        match_mode: MatchMode = MatchMode.LEGACY,
        pagination_mode: PaginationMode = PaginationMode.LEGACY,
    ) -> None:
        """
        Initialize ResponseFilter.

        Args:
            registry: ConditionRegistry used to evaluate clause conditions.
            match_mode: How answers are matched to clauses.
            pagination_mode: When the filtered set is sliced to the
                client's window.
        """
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use build_default_registry() from survey_proxy.filtering "
                "to create one."
            )
        self._registry = registry
        self.match_mode = match_mode
        self.pagination_mode = pagination_mode

    def matches(self, answer: Answer, clause: FilterClause) -> bool:
        if answer.question_id != clause.id:
            return False
        return self._registry.matches(clause.condition, answer.value, clause.value)

    def filter_response(
        self, response: SurveyResponse, expression: FilterExpression
    ) -> SurveyResponse | None:
        """Return the surviving (possibly pruned) response, or None if it is dropped."""
        if self.match_mode is MatchMode.STRICT:
            satisfied = all(
                any(self.matches(a, clause) for a in response.matchable_answers)
                for clause in expression
            )
            return response if satisfied else None

        kept = [
            a
            for a in response.matchable_answers
            if any(self.matches(a, clause) for clause in expression)
        ]
        if len(kept) != len(expression):
            return None
        return response.model_copy(update={"questions": kept})

    def filter_responses(
        self, responses: Iterable[SurveyResponse], expression: FilterExpression
    ) -> list[SurveyResponse]:
        out: list[SurveyResponse] = []
        for response in responses:
            survivor = self.filter_response(response, expression)
            if survivor is not None:
                out.append(survivor)
        return out

    def apply(self, result: PagedResult, filters: Any, page: PageRequest) -> PagedResult:
        """
        Filter ``result`` and re-paginate it for the client's ``page``.

        Args:
            result: Candidate page fetched from upstream.
            filters: A FilterExpression, or its raw JSON string / list form.
            page: The client's original pagination request.

        Returns:
            A new PagedResult with ``totalResponses`` set to the number of
            survivors and ``pageCount`` computed from the client's
            limit/offset.

        Raises:
            FilterParseError: If ``filters`` is malformed.
        """
        expression = parse_filter_expression(filters)
        survivors = self.filter_responses(result.responses, expression)
        return result.model_copy(
            update={
                "responses": paginate(survivors, page, self.pagination_mode),
                "total_responses": len(survivors),
                "page_count": page_count(page.offset, page.limit),
            }
        )


def apply_filter(
    result: PagedResult,
    filters: Any,
    page: PageRequest,
    *,
    registry: ConditionRegistry | None = None,
) -> PagedResult:
    """Filter with the default registry and legacy semantics."""
    return ResponseFilter(registry or build_default_registry()).apply(result, filters, page)
