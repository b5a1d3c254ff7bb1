from __future__ import annotations

from typing import Any, Mapping, Tuple

# Column names as they appear in the schedule sheet
DAY = "Day"
TIME_SLOT = "Time Slot"
COURSE_CODE = "Course Code"
TEACHER = "Teacher"
SEMESTER_SECTION = "Semester & Section"
ROOM = "Room"

# Fixed order used for display and for the free-text haystack
FIELDS: Tuple[str, ...] = (DAY, TIME_SLOT, COURSE_CODE, TEACHER, SEMESTER_SECTION, ROOM)

Row = Mapping[str, Any]


def field_value(row: Row, field: str) -> str:
    """
    Value of `field` in `row`, or "" when the field is missing or not a string.
    """
    value = row.get(field)
    return value if isinstance(value, str) else ""
