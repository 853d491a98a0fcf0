"""
FilterSet - Filter Set Orchestration

Validates an ordered list of filters as one unit and folds them into a single
predicate. Either every filter is valid and the whole set compiles, or the
set fails with one aggregated error and nothing is compiled.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import ColumnElement, FromClause, Select, and_, or_, true

from filterset.columns import as_table, columns_from_table
from filterset.core.config import settings
from filterset.core.exceptions import FilterValidationError, UnknownColumnError
from filterset.core.logging import LoggerMixin
from filterset.core.types import Column, FilterSetState
from filterset.filters.compiler import compile_filter
from filterset.filters.filter import Filter, FilterSpec
from filterset.filters import registry


class FilterSet(LoggerMixin):
    """
    Ordered filters over one table, combined left to right.

    Example:
        filter_set = FilterSet(specs, people)
        statement = filter_set.apply(select(people))
    """

    def __init__(self, specs: Iterable[FilterSpec], table: Any):
        self._table: FromClause = as_table(table)
        self.filters: list[Filter] = []
        for spec in specs:
            self._check_columns(spec)
            self.filters.append(Filter.for_spec(spec))
        self._state = FilterSetState.UNVALIDATED
        self._error: Optional[FilterValidationError] = None
        self._predicate: Optional[ColumnElement[bool]] = None

        self.logger.debug(
            "Built filter set",
            table=self._table.name,
            filter_count=len(self.filters),
        )

    def _check_columns(self, spec: FilterSpec) -> None:
        """Raise UnknownColumnError if the spec names a column the table lacks."""
        for column in (spec.field, spec.column_value):
            if column is not None and column.name not in self._table.c:
                raise UnknownColumnError(column.name, self._table.name)

    @classmethod
    def from_payload(cls, payloads: Iterable[dict[str, Any]], table: Any) -> "FilterSet":
        """Build a filter set from camelCase payloads naming the table's columns.

        Raises:
            UnknownColumnError: A payload names a column the table lacks.
            UnsupportedColumnTypeError: A payload filters on an unsupported type.
        """
        columns = columns_from_table(table)
        return cls([FilterSpec.from_payload(p, columns) for p in payloads], table)

    @staticmethod
    def supported(column: Column) -> bool:
        """Check whether filters can be built on the column."""
        return registry.supported(column)

    @property
    def state(self) -> FilterSetState:
        return self._state

    def validate(self) -> None:
        """
        Validate every filter and fail once for the whole set.

        Raises:
            FilterValidationError: One or more filters are invalid. The message
                joins each invalid filter's message with ", ".
        """
        if self._state == FilterSetState.INVALID:
            raise self._error
        if self._state != FilterSetState.UNVALIDATED:
            return

        messages = [f.error_message() for f in self.filters]
        errors = list(dict.fromkeys(m for m in messages if m is not None))

        if errors:
            self._state = FilterSetState.INVALID
            self._error = FilterValidationError(errors)
            self.logger.info(
                "Filter validation failed",
                table=self._table.name,
                error_count=len(errors),
            )
            raise self._error

        self._state = FilterSetState.VALIDATED

    def to_predicate(self) -> ColumnElement[bool]:
        """
        Fold the filters into one predicate, starting from all rows.

        Each filter is joined to everything before it with OR when its
        `is_or` flag is set and with AND otherwise, in input order.
        """
        self.validate()
        if self._predicate is not None:
            return self._predicate

        predicate: ColumnElement[bool] = true()
        for filter_ in self.filters:
            leaf = compile_filter(filter_, self._table)
            predicate = or_(predicate, leaf) if filter_.is_or else and_(predicate, leaf)

        self._predicate = predicate
        self._state = FilterSetState.COMPILED

        if settings.FILTER_LOG_PREDICATES:
            self.logger.debug("Compiled filter predicate", predicate=str(predicate))

        return predicate

    def apply(self, statement: Select) -> Select:
        """Restrict a select statement by the compiled predicate."""
        predicate = self.to_predicate()
        self._state = FilterSetState.APPLIED
        return statement.where(predicate)
