"""
FilterSet - Custom Exceptions
"""

from typing import Any, Optional


class FilterSetException(Exception):
    """Base exception for all filterset errors."""

    def __init__(
        self,
        message: str,
        code: str = "FILTERSET_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Construction Exceptions
# =============================================================================

class UnsupportedColumnTypeError(FilterSetException):
    """Raised when a filter is built on a column type with no filter variant.

    Callers are expected to check support first; this is not a validation
    failure and is never aggregated.
    """

    def __init__(self, column_name: str, column_type: str):
        super().__init__(
            message=f"Filtering is not supported on {column_name} (type: {column_type})",
            code="UNSUPPORTED_COLUMN_TYPE",
            details={"column": column_name, "type": column_type},
        )


class UnknownColumnError(FilterSetException):
    """Raised when a filter names a column the table does not have."""

    def __init__(self, column_name: str, table_name: Optional[str] = None):
        where = f" on {table_name}" if table_name else ""
        super().__init__(
            message=f"Unknown column{where}: {column_name}",
            code="UNKNOWN_COLUMN",
            details={"column": column_name, "table": table_name},
        )


# =============================================================================
# Validation Exceptions
# =============================================================================

class FilterValidationError(FilterSetException):
    """Raised once per filter set when one or more filters are invalid."""

    def __init__(self, errors: list[str]):
        super().__init__(
            message=", ".join(errors),
            code="FILTER_VALIDATION_ERROR",
            details={"errors": list(errors)},
        )

    @property
    def errors(self) -> list[str]:
        return self.details["errors"]

