"""
FilterSet

Validates client-supplied column filters against each column's semantic type
and compiles them into one SQLAlchemy predicate.
"""

from filterset.core import (
    Column,
    ColumnType,
    FilterSetException,
    FilterValidationError,
    UnknownColumnError,
    UnsupportedColumnTypeError,
)
from filterset.columns import column_type_for, columns_from_table
from filterset.filters import FilterSet, FilterSpec, Operation

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnType",
    "FilterSetException",
    "FilterValidationError",
    "UnknownColumnError",
    "UnsupportedColumnTypeError",
    "column_type_for",
    "columns_from_table",
    "FilterSet",
    "FilterSpec",
    "Operation",
]
