from __future__ import annotations

from typing import Dict, List, NamedTuple

import pandas as pd

from routine_finder.core.fields import (
    COURSE_CODE,
    DAY,
    FIELDS,
    ROOM,
    SEMESTER_SECTION,
    TEACHER,
    TIME_SLOT,
    field_value,
)
from routine_finder.core.query import QueryResult, QueryStatus
from routine_finder.ui.ids import IDs

ALL_VALUE = ""

INACTIVE_MESSAGE = "Select a filter to view routine"
NO_MATCHES_MESSAGE = "No matches. Try another filter."


class FilterControl(NamedTuple):
    key: str  # FilterState attribute
    column: str  # row column it filters on
    control_id: str
    label: str
    all_label: str


CATEGORICAL_CONTROLS: List[FilterControl] = [
    FilterControl("day", DAY, IDs.Control.DAY_SELECT, "Day", "All days"),
    FilterControl("slot", TIME_SLOT, IDs.Control.SLOT_SELECT, "Time slot", "All slots"),
    FilterControl("course", COURSE_CODE, IDs.Control.COURSE_SELECT, "Course", "All courses"),
    FilterControl("teacher", TEACHER, IDs.Control.TEACHER_SELECT, "Teacher", "All teachers"),
    FilterControl("semsec", SEMESTER_SECTION, IDs.Control.SEMSEC_SELECT, "Semester & section", "All semesters"),
    FilterControl("room", ROOM, IDs.Control.ROOM_SELECT, "Room", "All rooms"),
]


def get_filter_dropdown_options(domains: Dict[str, List[str]]) -> Dict[str, List[dict]]:
    """
    Dropdown options per control id, each list starting with the "All ..." choice.
    """
    return {
        control.control_id: [{"label": control.all_label, "value": ALL_VALUE}]
        + [{"label": v, "value": v} for v in domains.get(control.column, [])]
        for control in CATEGORICAL_CONTROLS
    }


def result_message(result: QueryResult) -> str:
    if result.status is QueryStatus.INACTIVE:
        return INACTIVE_MESSAGE
    return f"{result.count} class(es) found"


def result_records(result: QueryResult) -> List[Dict[str, str]]:
    """Rows of the result as DataTable records, missing values shown as blanks."""
    return [
        {column: field_value(row, column) for column in FIELDS}
        for row in result.rows
    ]


def result_frame(result: QueryResult) -> pd.DataFrame:
    return pd.DataFrame.from_records(result_records(result), columns=list(FIELDS))
