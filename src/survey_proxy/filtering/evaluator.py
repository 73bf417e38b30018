"""Condition strategies and the registry the filter engine dispatches through.

A condition tag (``"equals"``, ``"greater_than"``, ...) names one
ConditionOperator. Tags nobody registered are not an error: a clause
carrying one simply never matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ConditionOperator(ABC):
    """Compare one answer value against one clause value."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Condition tag as it appears in the ``filters`` parameter."""
        ...

    @abstractmethod
    def evaluate(self, answer_value: Any, clause_value: Any) -> bool: ...


class ConditionRegistry:
    """
    Condition tag -> ConditionOperator.

    Usage::

        registry = ConditionRegistry()
        registry.register(EqualsOperator())

        registry.matches("equals", answer.value, clause.value)
    """

    def __init__(self) -> None:
        self._operators: dict[str, ConditionOperator] = {}

    def register(self, operator: ConditionOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: ConditionOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, condition: str) -> ConditionOperator | None:
        return self._operators.get(condition)

    def matches(self, condition: str, answer_value: Any, clause_value: Any) -> bool:
        """Evaluate ``condition``; an unregistered tag is False, never an error."""
        op = self.get(condition)
        if op is None:
            return False
        return op.evaluate(answer_value, clause_value)
