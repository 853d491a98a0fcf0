"""
FilterSet - Predicate Compiler

Maps a validated filter onto a SQLAlchemy boolean expression. Client strings
are converted to the Python type the column binds (UUID, date, datetime,
number) before they reach the expression. A string that does not convert,
which only happens for unchecked IN values, is bound as a plain string
literal instead.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

from sqlalchemy import ColumnElement, FromClause, String, false, literal, or_, true

from filterset.core.types import ColumnType
from filterset.filters.filter import Filter
from filterset.filters.operations import Operation
from filterset.filters.rules import is_true_token


def _to_decimal(raw: str) -> Decimal:
    number = Decimal(raw.strip())
    if not number.is_finite():
        raise ValueError(f"Not a finite number: {raw}")
    return number


def _to_integer(raw: str) -> Any:
    number = _to_decimal(raw)
    if number == number.to_integral_value():
        return int(number)
    return float(number)


def _to_date(raw: str) -> date:
    return datetime.fromisoformat(raw).date()


BIND_COERCIONS: dict[ColumnType, Callable[[str], Any]] = {
    ColumnType.UUID: uuid.UUID,
    ColumnType.DATE: _to_date,
    ColumnType.DATETIME: datetime.fromisoformat,
    ColumnType.INTEGER: _to_integer,
    ColumnType.NUMERIC: _to_decimal,
    ColumnType.DECIMAL: _to_decimal,
    ColumnType.FLOAT: lambda raw: float(_to_decimal(raw)),
}


def bind_value(column_type: ColumnType, raw: str) -> Any:
    """Convert a client string for binding against a column of the given type."""
    convert = BIND_COERCIONS.get(column_type)
    if convert is None:
        return raw
    try:
        return convert(raw)
    except (ValueError, ArithmeticError):
        return literal(raw, String)


def compile_filter(filter_: Filter, table: FromClause) -> ColumnElement[bool]:
    """Compile one validated filter against the table it was built for."""
    column = table.c[filter_.column.name]
    column_type = filter_.column.type
    op = filter_.operation

    if op == Operation.EQUAL:
        return column == _operand(filter_, table)
    if op == Operation.NOT_EQUAL:
        return column != _operand(filter_, table)
    if op == Operation.GREATER_THAN:
        return column > bind_value(column_type, filter_.value)
    if op == Operation.LESS_THAN:
        return column < bind_value(column_type, filter_.value)
    if op == Operation.LIKE:
        return column.like(filter_.value)
    if op == Operation.NOT_LIKE:
        return column.not_like(filter_.value)
    if op == Operation.IN:
        return column.in_([bind_value(column_type, v) for v in filter_.array_values])
    if op == Operation.WITH:
        if is_true_token(filter_.value):
            return column == true()
        # A false token matches both true and false rows. Kept as-is until the
        # intended "is false" semantics are confirmed.
        return or_(column == true(), column == false())

    raise ValueError(f"Unsupported operation: {op}")


def _operand(filter_: Filter, table: FromClause) -> Any:
    if filter_.value is not None:
        return bind_value(filter_.column.type, filter_.value)
    return table.c[filter_.column_value.name]
