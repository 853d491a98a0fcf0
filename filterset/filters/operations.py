"""
FilterSet - Filter Operations
"""

from enum import Enum


class Operation(str, Enum):
    """Comparison kinds a filter can request."""
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN = "LESS_THAN"
    LIKE = "LIKE"
    NOT_LIKE = "NOT_LIKE"
    IN = "IN"
    WITH = "WITH"       # Boolean token, allowed on every column type

    @property
    def display_name(self) -> str:
        """Name shown in error messages."""
        return self.name


# Operations whose presence rule accepts a column reference instead of a value
COMPARISON_OPERATIONS = frozenset({Operation.EQUAL, Operation.NOT_EQUAL})

# Operations that skip the per-type value format rule
UNFORMATTED_OPERATIONS = frozenset({Operation.WITH, Operation.IN})
