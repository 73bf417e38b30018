"""Wire models for survey responses and pagination envelopes.

Upstream payloads are kept verbatim: unknown keys survive a round trip via
``extra="allow"`` and serialization always uses the upstream (camelCase)
key names.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LIMIT = 150
DEFAULT_STATUS = "finished"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Answer(BaseModel):
    """One question's recorded value within a response."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    question_id: Any = Field(default=None, alias="id")
    value: Any = None


class SurveyResponse(BaseModel):
    """One survey submission with its ordered answers."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    submission_id: Any = Field(default=None, alias="submissionId")
    submission_time: Any = Field(default=None, alias="submissionTime")
    last_updated_at: Any = Field(default=None, alias="lastUpdatedAt")
    # null is kept as-is and treated as "no answers" when filtering
    questions: list[Answer] | None = None

    @property
    def matchable_answers(self) -> list[Answer]:
        return self.questions or []


class PagedResult(BaseModel):
    """A page of responses as returned to the client.

    ``page_count`` is the approximate *current* page number
    (``ceil(offset / limit) + 1``), not the total number of pages.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    responses: list[SurveyResponse] = Field(default_factory=list)
    total_responses: Any = Field(default=0, alias="totalResponses")
    page_count: Any = Field(default=None, alias="pageCount")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with upstream key names, omitting fields never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class PageRequest(BaseModel):
    """Normalized client pagination intent plus upstream pass-through filters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    offset: int = Field(default=0, ge=0)
    after_date: str = Field(default="", alias="afterDate")
    before_date: str = Field(default="", alias="beforeDate")
    status: str = DEFAULT_STATUS
    include_edit_link: bool = Field(default=False, alias="includeEditLink")
    sort: SortOrder = SortOrder.ASC
