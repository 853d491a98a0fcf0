"""
FilterSet - Shared Type Definitions
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class ColumnType(str, Enum):
    """Semantic type of a column, independent of its physical storage."""
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    NUMERIC = "numeric"
    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    STRING = "string"
    TEXT = "text"
    UUID = "uuid"
    TIME = "time"
    JSON = "json"
    BINARY = "binary"
    OTHER = "other"


class ViolationKind(str, Enum):
    """Kinds of validation failure a single filter can produce."""
    OPERATION_NOT_SUPPORTED = "operation_not_supported"
    BOOLEAN_TOKEN_INVALID = "boolean_token_invalid"
    VALUE_REQUIRED = "value_required"
    VALUES_REQUIRED = "values_required"
    VALUE_OR_COLUMN_REQUIRED = "value_or_column_required"
    VALUE_FORMAT_INVALID = "value_format_invalid"


class FilterSetState(str, Enum):
    """Lifecycle of a filter set."""
    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    INVALID = "invalid"
    COMPILED = "compiled"
    APPLIED = "applied"


# =============================================================================
# Column Metadata
# =============================================================================

class Column(BaseModel):
    """A filterable column: its name and semantic type."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType

    @property
    def field_name(self) -> str:
        """Column name in lowerCamelCase, as clients address it."""
        head, *rest = self.name.split("_")
        return head + "".join(part[:1].upper() + part[1:] for part in rest)


# =============================================================================
# Violations
# =============================================================================

class Violation(BaseModel):
    """One failed validation rule."""

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    message: str
