"""
FilterSet - Column Metadata

Derives filterable column metadata from SQLAlchemy tables and models.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Float,
    FromClause,
    Integer,
    LargeBinary,
    Numeric,
    String,
    Text,
    Time,
    Uuid,
)
from sqlalchemy.types import TypeEngine

from filterset.core.types import Column, ColumnType


# Checked in order; subclasses come before their bases
_TYPE_MAP: tuple[tuple[type[TypeEngine], ColumnType], ...] = (
    (Boolean, ColumnType.BOOLEAN),
    (DateTime, ColumnType.DATETIME),
    (Date, ColumnType.DATE),
    (Time, ColumnType.TIME),
    (Integer, ColumnType.INTEGER),
    (Float, ColumnType.FLOAT),
    (Numeric, ColumnType.DECIMAL),
    (Uuid, ColumnType.UUID),
    (Text, ColumnType.TEXT),
    (String, ColumnType.STRING),
    (JSON, ColumnType.JSON),
    (LargeBinary, ColumnType.BINARY),
)


def column_type_for(sql_type: TypeEngine) -> ColumnType:
    """Map a SQLAlchemy column type onto a semantic column type."""
    for type_class, column_type in _TYPE_MAP:
        if isinstance(sql_type, type_class):
            return column_type
    return ColumnType.OTHER


def as_table(source: Any) -> FromClause:
    """Accept a Table or a declarative model class and return the table."""
    return getattr(source, "__table__", source)


def columns_from_table(source: Any) -> dict[str, Column]:
    """Describe every column of a table as filterable column metadata."""
    table = as_table(source)
    return {
        col.name: Column(name=col.name, type=column_type_for(col.type))
        for col in table.columns
    }
