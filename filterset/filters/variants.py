"""
FilterSet - Filter Variants

A variant is the fixed rule set bound to one family of column types. Rules
are assembled once, when the variant is defined: the operation whitelist
first, then the rules shared by every variant, then the variant's value
format rule if it has one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from filterset.filters.operations import Operation
from filterset.filters.rules import (
    COMMON_RULES,
    ValidationRule,
    format_rule,
    is_iso8601,
    is_numeric,
    is_uuid,
    iso8601_message,
    operation_rule,
)


@dataclass(frozen=True)
class FilterVariant:
    """Allowed operations and validation rules for one column family."""
    name: str
    operations: frozenset[Operation]
    value_format: Optional[ValidationRule] = None
    rules: tuple[ValidationRule, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        rules = (operation_rule(self.allowed_operations), *COMMON_RULES)
        if self.value_format is not None:
            rules = (*rules, self.value_format)
        object.__setattr__(self, "rules", rules)

    @property
    def allowed_operations(self) -> tuple[Operation, ...]:
        """Declared operations plus WITH, in enum order."""
        return tuple(
            op for op in Operation
            if op in self.operations or op == Operation.WITH
        )


BOOLEAN = FilterVariant(name="boolean", operations=frozenset())

DATE = FilterVariant(
    name="date",
    operations=frozenset({Operation.GREATER_THAN, Operation.LESS_THAN}),
    value_format=format_rule(is_iso8601, iso8601_message),
)

NUMERIC = FilterVariant(
    name="numeric",
    operations=frozenset({
        Operation.GREATER_THAN,
        Operation.LESS_THAN,
        Operation.EQUAL,
        Operation.NOT_EQUAL,
        Operation.IN,
    }),
    value_format=format_rule(is_numeric, lambda f: "only supports numerical values"),
)

STRING = FilterVariant(
    name="string",
    operations=frozenset({
        Operation.EQUAL,
        Operation.NOT_EQUAL,
        Operation.LIKE,
        Operation.NOT_LIKE,
        Operation.IN,
    }),
)

UUID = FilterVariant(
    name="uuid",
    operations=frozenset({Operation.EQUAL, Operation.NOT_EQUAL, Operation.IN}),
    value_format=format_rule(
        is_uuid,
        lambda f: "only supports UUID values (e.g. 00000000-0000-0000-0000-000000000000)",
    ),
)
