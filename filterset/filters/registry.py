"""
FilterSet - Column Type Registry
"""

from __future__ import annotations

from typing import Optional

from filterset.core.types import Column, ColumnType
from filterset.filters import variants
from filterset.filters.variants import FilterVariant


VARIANTS: dict[ColumnType, FilterVariant] = {
    ColumnType.BOOLEAN: variants.BOOLEAN,
    ColumnType.DATE: variants.DATE,
    ColumnType.DATETIME: variants.DATE,
    ColumnType.NUMERIC: variants.NUMERIC,
    ColumnType.INTEGER: variants.NUMERIC,
    ColumnType.DECIMAL: variants.NUMERIC,
    ColumnType.FLOAT: variants.NUMERIC,
    ColumnType.STRING: variants.STRING,
    ColumnType.TEXT: variants.STRING,
    ColumnType.UUID: variants.UUID,
}


def variant_for(column_type: ColumnType) -> Optional[FilterVariant]:
    """Get the filter variant for a column type, or None if unsupported."""
    return VARIANTS.get(column_type)


def supported(column: Column) -> bool:
    """Check whether filters can be built on the column."""
    return variant_for(column.type) is not None
