from enum import Enum


class FilterCondition(str, Enum):
    """Condition tags understood by the default registry."""

    EQUALS = "equals"
    DOES_NOT_EQUAL = "does_not_equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
