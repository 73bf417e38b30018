"""Comparison conditions: equals, does_not_equal, greater_than, less_than."""

from __future__ import annotations

from typing import Any

from .conditions import FilterCondition
from .evaluator import ConditionOperator, ConditionRegistry
from .values import orderable, strictly_equal


class EqualsOperator(ConditionOperator):
    @property
    def name(self) -> str:
        return FilterCondition.EQUALS.value

    def evaluate(self, answer_value: Any, clause_value: Any) -> bool:
        return strictly_equal(answer_value, clause_value)


class DoesNotEqualOperator(ConditionOperator):
    @property
    def name(self) -> str:
        return FilterCondition.DOES_NOT_EQUAL.value

    def evaluate(self, answer_value: Any, clause_value: Any) -> bool:
        return not strictly_equal(answer_value, clause_value)


class GreaterThanOperator(ConditionOperator):
    @property
    def name(self) -> str:
        return FilterCondition.GREATER_THAN.value

    def evaluate(self, answer_value: Any, clause_value: Any) -> bool:
        if not orderable(answer_value, clause_value):
            return False
        return bool(answer_value > clause_value)


class LessThanOperator(ConditionOperator):
    @property
    def name(self) -> str:
        return FilterCondition.LESS_THAN.value

    def evaluate(self, answer_value: Any, clause_value: Any) -> bool:
        if not orderable(answer_value, clause_value):
            return False
        return bool(answer_value < clause_value)


def build_default_registry() -> ConditionRegistry:
    """
    Create a registry with all built-in conditions.

    Returns a fresh ConditionRegistry instance; use this to create
    registries for dependency injection.

    Example:
        >>> registry = build_default_registry()
        >>> registry.matches("equals", "yes", "yes")
        True
    """
    registry = ConditionRegistry()
    registry.register_all(
        EqualsOperator(),
        DoesNotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
    )
    return registry
