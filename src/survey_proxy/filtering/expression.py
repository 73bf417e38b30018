"""FilterClause and FilterExpression value objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator

from .exceptions import FilterParseError
from .values import ValueKind, kind_of


class FilterClause(BaseModel):
    """One condition: the answer to question ``id`` must satisfy ``condition`` against ``value``.

    ``condition`` is any string; tags unknown to the registry parse but
    never match.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    condition: StrictStr
    value: Any

    @field_validator("value")
    @classmethod
    def _scalar_value(cls, v: Any) -> Any:
        if kind_of(v) is ValueKind.OTHER:
            raise ValueError("clause value must be a string, number, boolean or null")
        return v


@dataclass(frozen=True)
class FilterExpression:
    """Ordered, non-empty set of clauses a response must satisfy."""

    clauses: tuple[FilterClause, ...]

    def __post_init__(self) -> None:
        if not self.clauses:
            raise FilterParseError("Filter expression must contain at least one clause")

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self) -> Iterator[FilterClause]:
        return iter(self.clauses)
