"""JsonFilterSyntax: parse the ``filters`` query parameter into a FilterExpression."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import FilterParseError
from .expression import FilterClause, FilterExpression


class JsonFilterSyntax:
    """Parse a JSON array: ``[{"id": "q1", "condition": "equals", "value": "yes"}]``.

    Accepts the raw JSON string, an already-decoded list, or an existing
    FilterExpression (returned unchanged).
    """

    def parse_filter(self, raw: Any) -> FilterExpression:
        if isinstance(raw, FilterExpression):
            return raw
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError as e:
                raise FilterParseError(f"filters is not valid JSON: {e}", path="filters") from e
            except RecursionError as e:
                raise FilterParseError("filters is nested too deeply", path="filters") from e
        if not isinstance(raw, (list, tuple)):
            raise FilterParseError(
                f"filters must be a JSON array of clauses, got {type(raw).__name__}",
                path="filters",
            )
        clauses = tuple(self._parse_clause(item, i) for i, item in enumerate(raw))
        return FilterExpression(clauses)

    def _parse_clause(self, item: Any, index: int) -> FilterClause:
        path = f"filters[{index}]"
        if isinstance(item, FilterClause):
            return item
        if not isinstance(item, dict):
            raise FilterParseError(f"Expected a clause object, got {item!r}", path=path)
        try:
            return FilterClause.model_validate(item)
        except PydanticValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(p) for p in first["loc"])
            raise FilterParseError(
                f"Invalid clause field {loc!r}: {first['msg']}",
                path=f"{path}.{loc}" if loc else path,
            ) from e


def parse_filter_expression(raw: Any) -> FilterExpression:
    """Module-level shortcut for ``JsonFilterSyntax().parse_filter(raw)``."""
    return JsonFilterSyntax().parse_filter(raw)
