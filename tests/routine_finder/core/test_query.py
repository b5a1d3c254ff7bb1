from __future__ import annotations

from routine_finder.core.fields import (
    COURSE_CODE,
    DAY,
    ROOM,
    SEMESTER_SECTION,
    TEACHER,
    TIME_SLOT,
)
from routine_finder.core.filter_state import FilterState
from routine_finder.core.query import (
    QueryResult,
    QueryStatus,
    matches,
    query,
    row_text,
    sort_rows,
)


def _row(day="", slot="", course="", teacher="", semsec="", room=""):
    return {
        DAY: day,
        TIME_SLOT: slot,
        COURSE_CODE: course,
        TEACHER: teacher,
        SEMESTER_SECTION: semsec,
        ROOM: room,
    }


def _rows():
    return [
        _row("Monday", "Slot 2", "CSE101", "Dr. Rahman", "3A", "305"),
        _row("Sunday", "Slot 10", "MAT201", "Ms. Akter", "1B", "204"),
        _row("Sunday", "Slot 2", "CSE205", "Dr. Rahman", "5C", "306"),
        _row("Wednesday", "Slot 1", "PHY110", "Mr. Karim", "1A", "101"),
    ]


def test_no_filter_is_inactive_even_with_rows():
    result = query(_rows(), FilterState())

    assert result.status is QueryStatus.INACTIVE
    assert result.rows == ()
    assert result.count == 0
    assert not result.is_active


def test_whitespace_only_query_is_inactive():
    result = query(_rows(), FilterState(q="   "))
    assert result.status is QueryStatus.INACTIVE


def test_free_text_unique_substring_finds_one_row():
    result = query(_rows(), FilterState(q="phy110"))

    assert result.status is QueryStatus.FOUND
    assert result.count == 1
    assert result.rows[0][COURSE_CODE] == "PHY110"


def test_free_text_is_case_insensitive():
    result = query(_rows(), FilterState(q="RAHMAN"))
    assert [r[COURSE_CODE] for r in result.rows] == ["CSE205", "CSE101"]


def test_free_text_can_span_adjacent_fields():
    # "Monday Slot" only exists across the Day/Time Slot boundary
    result = query(_rows(), FilterState(q="monday slot"))
    assert result.count == 1
    assert result.rows[0][DAY] == "Monday"


def test_categorical_filters_are_exact_and_case_sensitive():
    assert query(_rows(), FilterState(room="305")).count == 1
    assert query(_rows(), FilterState(room="30")).status is QueryStatus.EMPTY
    assert query(_rows(), FilterState(teacher="dr. rahman")).status is QueryStatus.EMPTY


def test_filters_combine_with_and():
    result = query(_rows(), FilterState(teacher="Dr. Rahman", day="Sunday"))
    assert [r[COURSE_CODE] for r in result.rows] == ["CSE205"]

    result = query(_rows(), FilterState(teacher="Dr. Rahman", day="Wednesday"))
    assert result.status is QueryStatus.EMPTY
    assert result.is_active
    assert result.count == 0


def test_every_result_row_comes_from_input_and_satisfies_filters():
    rows = _rows()
    filters = FilterState(q="slot 2", semsec="5C")
    result = query(rows, filters)

    assert result.count == 1
    for row in result.rows:
        assert any(row is original for original in rows)
        assert matches(row, filters)


def test_weekday_ordering():
    rows = [
        _row("Monday", "Slot 1", "A"),
        _row("Wednesday", "Slot 1", "A"),
        _row("Sunday", "Slot 1", "A"),
    ]
    result = query(rows, FilterState(slot="Slot 1"))
    assert [r[DAY] for r in result.rows] == ["Sunday", "Monday", "Wednesday"]


def test_slot_ordering_is_numeric():
    rows = [_row("Sunday", "Slot 10", "A"), _row("Sunday", "Slot 2", "A")]
    result = query(rows, FilterState(day="Sunday"))
    assert [r[TIME_SLOT] for r in result.rows] == ["Slot 2", "Slot 10"]


def test_course_code_breaks_ties_with_empty_first():
    rows = [
        _row("Sunday", "Slot 1", "MAT201", room="1"),
        _row("Sunday", "Slot 1", "", room="1"),
        _row("Sunday", "Slot 1", "CSE101", room="1"),
    ]
    result = query(rows, FilterState(room="1"))
    assert [r[COURSE_CODE] for r in result.rows] == ["", "CSE101", "MAT201"]


def test_unknown_day_and_unranked_slot_sort_last():
    rows = [
        _row("Holiday", "Slot 1", "A", room="1"),
        _row("Saturday", "Lunch", "A", room="1"),
        _row("Saturday", "Slot 9", "A", room="1"),
    ]
    result = query(rows, FilterState(room="1"))
    assert [(r[DAY], r[TIME_SLOT]) for r in result.rows] == [
        ("Saturday", "Slot 9"),
        ("Saturday", "Lunch"),
        ("Holiday", "Slot 1"),
    ]


def test_duplicate_rows_are_kept_in_input_order():
    first = _row("Sunday", "Slot 1", "CSE101", room="305")
    second = _row("Sunday", "Slot 1", "CSE101", room="305")
    result = query([first, second], FilterState(course="CSE101"))

    assert result.count == 2
    assert result.rows[0] is first
    assert result.rows[1] is second


def test_sorting_is_idempotent():
    ordered = sort_rows(_rows())
    assert sort_rows(ordered) == ordered


def test_missing_and_non_string_fields_read_as_empty():
    rows = [{DAY: "Sunday", ROOM: 305}, {DAY: None, COURSE_CODE: "CSE101"}]

    assert row_text(rows[0]) == "sunday     "
    assert query(rows, FilterState(room="305")).status is QueryStatus.EMPTY

    result = query(rows, FilterState(q="cse101"))
    assert result.count == 1
    assert result.rows[0] is rows[1]


def test_empty_row_collection():
    assert query([], FilterState()).status is QueryStatus.INACTIVE
    assert query([], FilterState(q="x")).status is QueryStatus.EMPTY


def test_end_to_end_course_filter():
    monday = {DAY: "Monday", COURSE_CODE: "CSE101", ROOM: "306"}
    sunday = {DAY: "Sunday", COURSE_CODE: "CSE101", ROOM: "305"}

    result = query([monday, sunday], FilterState(course="CSE101"))

    assert result.status is QueryStatus.FOUND
    assert result.count == 2
    assert result.rows == (sunday, monday)


def test_query_result_of():
    assert QueryResult.of([]).status is QueryStatus.EMPTY
    assert QueryResult.of([_row()]).status is QueryStatus.FOUND
