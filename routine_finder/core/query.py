from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .fields import COURSE_CODE, DAY, FIELDS, TIME_SLOT, Row, field_value
from .filter_state import FilterState
from .ordering import day_rank, slot_rank


class QueryStatus(str, enum.Enum):
    INACTIVE = "inactive"
    EMPTY = "empty"
    FOUND = "found"


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a query.

    - INACTIVE: no filter is set, nothing should be shown
    - EMPTY: filters are set but no row matched
    - FOUND: filters are set and `count` >= 1 rows matched
    """
    status: QueryStatus
    rows: Tuple[Row, ...] = ()

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def is_active(self) -> bool:
        return self.status is not QueryStatus.INACTIVE

    @classmethod
    def inactive(cls) -> QueryResult:
        return cls(status=QueryStatus.INACTIVE)

    @classmethod
    def of(cls, rows: Iterable[Row]) -> QueryResult:
        rows = tuple(rows)
        return cls(status=QueryStatus.FOUND if rows else QueryStatus.EMPTY, rows=rows)


def row_text(row: Row) -> str:
    """Lower-cased, space-joined row values used for free-text search."""
    return " ".join(field_value(row, field) for field in FIELDS).lower()


def matches(row: Row, filters: FilterState) -> bool:
    # joined text means a query can straddle two adjacent columns
    if filters.q and filters.q not in row_text(row):
        return False
    return all(
        field_value(row, column) == value
        for column, value in filters.categorical().items()
    )


def sort_key(row: Row) -> Tuple[int, int, str]:
    return (
        day_rank(field_value(row, DAY)),
        slot_rank(field_value(row, TIME_SLOT)),
        field_value(row, COURSE_CODE),
    )


def sort_rows(rows: Iterable[Row]) -> List[Row]:
    """Stable sort by day, then slot number, then course code."""
    return sorted(rows, key=sort_key)


def query(rows: Iterable[Row], filters: FilterState) -> QueryResult:
    """
    Rows matching every set filter, in display order.

    With no filter set the result is INACTIVE, even for a non-empty table:
    the routine is only shown once the user has picked something.
    """
    if not filters.has_any_filter():
        return QueryResult.inactive()

    return QueryResult.of(sort_rows(row for row in rows if matches(row, filters)))
