"""
FilterSet - Test Configuration and Fixtures
"""
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Callable, Generator

import pytest
from sqlalchemy import (
    JSON,
    Boolean,
    Column as SAColumn,
    Date,
    DateTime,
    Engine,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    Time,
    Uuid,
    create_engine,
)

# =============================================================================
# Schema Fixtures
# =============================================================================

@pytest.fixture
def people() -> Table:
    """A table with one column of every type the filters know about."""
    metadata = MetaData()
    return Table(
        "people",
        metadata,
        SAColumn("id", Integer, primary_key=True),
        SAColumn("name", String(100)),
        SAColumn("nick_name", String(100)),
        SAColumn("age", Integer),
        SAColumn("score", Numeric(10, 2)),
        SAColumn("active", Boolean, nullable=True),
        SAColumn("born_on", Date),
        SAColumn("created_at", DateTime),
        SAColumn("external_id", Uuid),
        SAColumn("bio", Text),
        SAColumn("wakes_at", Time),
        SAColumn("profile", JSON),
    )


@pytest.fixture
def columns(people):
    """Column metadata for the people table, keyed by column name."""
    from filterset.columns import columns_from_table

    return columns_from_table(people)


@pytest.fixture
def make_spec(columns) -> Callable:
    """Factory for filter specs on the people table."""
    from filterset.filters.filter import FilterSpec

    def _make(field: str, operation: str, **kwargs) -> FilterSpec:
        column_value = kwargs.pop("column_value", None)
        return FilterSpec(
            field=columns[field],
            operation=operation,
            column_value=columns[column_value] if column_value else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_filter(make_spec) -> Callable:
    """Factory for filters on the people table."""
    from filterset.filters.filter import Filter

    def _make(field: str, operation: str, **kwargs):
        return Filter.for_spec(make_spec(field, operation, **kwargs))

    return _make


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest.fixture
def people_rows() -> list[dict]:
    """Rows loaded into the in-memory database."""
    return [
        {
            "id": 1, "name": "Alice", "nick_name": "Ally", "age": 30, "active": True,
            "born_on": date(1994, 3, 1),
            "created_at": datetime(2024, 1, 10, 9, 0),
            "external_id": uuid.UUID("11111111-1111-4111-8111-111111111111"),
        },
        {
            "id": 2, "name": "Bob", "nick_name": "Bob", "age": 17, "active": False,
            "born_on": date(2007, 6, 15),
            "created_at": datetime(2024, 2, 20, 12, 30),
            "external_id": uuid.UUID("22222222-2222-4222-8222-222222222222"),
        },
        {
            "id": 3, "name": "Alan", "nick_name": "Al", "age": 15, "active": True,
            "born_on": date(2009, 11, 30),
            "created_at": datetime(2024, 3, 5, 18, 45),
            "external_id": uuid.UUID("33333333-3333-4333-8333-333333333333"),
        },
        {
            "id": 4, "name": "Carol", "nick_name": "Caz", "age": 45, "active": None,
            "born_on": date(1979, 8, 21),
            "created_at": datetime(2024, 4, 1, 8, 15),
            "external_id": uuid.UUID("44444444-4444-4444-8444-444444444444"),
        },
    ]


@pytest.fixture
def engine(people, people_rows) -> Generator[Engine, None, None]:
    """In-memory SQLite engine holding the people table."""
    engine = create_engine("sqlite://")
    people.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(people.insert(), people_rows)
    yield engine
    engine.dispose()
