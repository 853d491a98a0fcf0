"""
FilterSet - Validation Rules

Each filter variant carries an ordered tuple of rule records. A single runner
evaluates every applicable rule and collects all violations; it never stops
at the first failure.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from filterset.core.types import Violation, ViolationKind
from filterset.filters.operations import (
    COMPARISON_OPERATIONS,
    UNFORMATTED_OPERATIONS,
    Operation,
)

if TYPE_CHECKING:
    from filterset.filters.filter import Filter


BOOLEAN_VALUES = ("t", "f", "true", "false")
TRUE_VALUES = ("t", "true")

UUID_FORMAT = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)
NUMERIC_FORMAT = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ValidationRule:
    """A named check, the condition under which it runs, and its message."""
    kind: ViolationKind
    applies: Callable[["Filter"], bool]
    check: Callable[["Filter"], bool]
    message: Callable[["Filter"], str]

    def evaluate(self, filter_: "Filter") -> Optional[Violation]:
        """Return a violation if the rule applies and fails, else None."""
        if not self.applies(filter_) or self.check(filter_):
            return None
        return Violation(kind=self.kind, message=self.message(filter_))


def run_rules(rules: Iterable[ValidationRule], filter_: "Filter") -> list[Violation]:
    """Evaluate every rule against the filter and collect all violations."""
    violations = []
    for rule in rules:
        violation = rule.evaluate(filter_)
        if violation is not None:
            violations.append(violation)
    return violations


# =============================================================================
# Value Format Checks
# =============================================================================

def is_boolean_token(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.casefold() in BOOLEAN_VALUES


def is_true_token(value: str) -> bool:
    return value.casefold() in TRUE_VALUES


def is_numeric(value: str) -> bool:
    return NUMERIC_FORMAT.fullmatch(value.strip()) is not None


def is_iso8601(value: str) -> bool:
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_uuid(value: str) -> bool:
    return UUID_FORMAT.fullmatch(value) is not None


def iso8601_message(_filter: "Filter") -> str:
    today = date.today()
    midnight = datetime.combine(today, time.min, tzinfo=timezone.utc)
    return (
        f'only supports ISO8601 values ("{today.isoformat()}", '
        f'"{midnight.isoformat()}")'
    )


# =============================================================================
# Rule Builders
# =============================================================================

def operation_rule(operations: Iterable[Operation]) -> ValidationRule:
    """Whitelist rule for a variant. WITH is always allowed."""
    allowed = tuple(dict.fromkeys([*operations, Operation.WITH]))
    names = ", ".join(op.display_name for op in allowed)
    return ValidationRule(
        kind=ViolationKind.OPERATION_NOT_SUPPORTED,
        applies=lambda f: True,
        check=lambda f: f.operation in allowed,
        message=lambda f: f"only supports the following operations: {names}",
    )


def format_rule(
    is_valid: Callable[[str], bool],
    message: Callable[["Filter"], str],
) -> ValidationRule:
    """Per-type value format rule.

    Skipped for WITH and IN, when the filter compares against another column,
    and when no value was given (the presence rules report that case).
    """
    return ValidationRule(
        kind=ViolationKind.VALUE_FORMAT_INVALID,
        applies=lambda f: (
            f.operation not in UNFORMATTED_OPERATIONS
            and f.column_value is None
            and f.value is not None
        ),
        check=lambda f: is_valid(f.value),
        message=message,
    )


BOOLEAN_TOKEN_RULE = ValidationRule(
    kind=ViolationKind.BOOLEAN_TOKEN_INVALID,
    applies=lambda f: f.operation == Operation.WITH,
    check=lambda f: is_boolean_token(f.value),
    message=lambda f: (
        f"WITH operation only supports boolean values ({', '.join(BOOLEAN_VALUES)})"
    ),
)

ARRAY_VALUES_PRESENCE_RULE = ValidationRule(
    kind=ViolationKind.VALUES_REQUIRED,
    applies=lambda f: f.operation == Operation.IN,
    check=lambda f: f.array_values is not None,
    message=lambda f: "array values can't be null",
)

VALUE_OR_COLUMN_PRESENCE_RULE = ValidationRule(
    kind=ViolationKind.VALUE_OR_COLUMN_REQUIRED,
    applies=lambda f: f.operation in COMPARISON_OPERATIONS,
    check=lambda f: f.value is not None or f.column_value is not None,
    message=lambda f: "value or column value must be provided",
)

VALUE_PRESENCE_RULE = ValidationRule(
    kind=ViolationKind.VALUE_REQUIRED,
    applies=lambda f: (
        f.operation != Operation.IN and f.operation not in COMPARISON_OPERATIONS
    ),
    check=lambda f: f.value is not None,
    message=lambda f: "value can't be null",
)

# Rules every variant runs after its operation whitelist
COMMON_RULES = (
    BOOLEAN_TOKEN_RULE,
    ARRAY_VALUES_PRESENCE_RULE,
    VALUE_OR_COLUMN_PRESENCE_RULE,
    VALUE_PRESENCE_RULE,
)
