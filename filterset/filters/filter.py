"""
FilterSet - Filter

A Filter binds one client-supplied criterion to the variant of its column.
It is built once per request and never changes afterwards; validation only
reports violations.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from filterset.core.config import settings
from filterset.core.exceptions import UnknownColumnError, UnsupportedColumnTypeError
from filterset.core.types import Column, Violation
from filterset.filters.operations import Operation
from filterset.filters.registry import variant_for
from filterset.filters.rules import run_rules
from filterset.filters.variants import FilterVariant


class FilterSpec(BaseModel):
    """Raw filter criterion as produced by the request layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    field: Column
    operation: Operation
    is_or: bool = Field(default=False, alias="isOr")
    value: Optional[str] = None
    array_values: Optional[list[str]] = Field(default=None, alias="arrayValues")
    column_value: Optional[Column] = Field(default=None, alias="columnValue")

    @classmethod
    def from_payload(
        cls,
        payload: dict[str, Any],
        columns: dict[str, Column],
    ) -> "FilterSpec":
        """Build a spec from a camelCase payload whose field names a column.

        `field` and `columnValue` are looked up in `columns` by column name or
        by its lowerCamelCase field name.
        """
        data = dict(payload)
        data["field"] = _resolve_column(data.get("field"), columns)
        for key in ("columnValue", "column_value"):
            if data.get(key) is not None:
                data[key] = _resolve_column(data[key], columns)
        return cls.model_validate(data)


def _resolve_column(name: Any, columns: dict[str, Column]) -> Column:
    if isinstance(name, Column):
        return name
    if name in columns:
        return columns[name]
    for column in columns.values():
        if column.field_name == name:
            return column
    raise UnknownColumnError(str(name))


@dataclass(frozen=True)
class Filter:
    """One typed filter: column, operation, OR/AND flag and raw values."""
    column: Column
    operation: Operation
    variant: FilterVariant
    is_or: bool = False
    value: Optional[str] = None
    array_values: Optional[tuple[str, ...]] = None
    column_value: Optional[Column] = None

    @classmethod
    def for_spec(cls, spec: FilterSpec) -> "Filter":
        """Build the filter for a spec, selecting the variant by column type.

        Raises:
            UnsupportedColumnTypeError: No variant exists for the column type.
        """
        variant = variant_for(spec.field.type)
        if variant is None:
            raise UnsupportedColumnTypeError(spec.field.name, spec.field.type.value)

        return cls(
            column=spec.field,
            operation=spec.operation,
            variant=variant,
            is_or=spec.is_or,
            value=spec.value,
            array_values=tuple(spec.array_values) if spec.array_values is not None else None,
            column_value=spec.column_value,
        )

    def validate(self) -> list[Violation]:
        """Run every rule of the variant and return all violations."""
        return run_rules(self.variant.rules, self)

    @property
    def display_value(self) -> str:
        if self.value is not None:
            return self.value
        if self.array_values is not None:
            return json.dumps(list(self.array_values))
        if self.column_value is not None:
            return self.column_value.name
        return ""

    @property
    def display_name(self) -> str:
        if settings.FILTER_CAMELIZE_FIELD_NAMES:
            return self.column.field_name
        return self.column.name

    def display_error_message(self, violations: list[Violation]) -> Optional[str]:
        """Render violations as one message, or None when there are none."""
        if not violations:
            return None
        reasons = ", ".join(dict.fromkeys(v.message for v in violations))
        return (
            f"{self.display_name} (type: {self.column.type.value}, "
            f"operation: {self.operation.display_name}, "
            f'value: "{self.display_value}"): {reasons}'
        )

    def error_message(self) -> Optional[str]:
        """Validate and render the result in one step."""
        return self.display_error_message(self.validate())
