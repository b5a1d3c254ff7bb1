from __future__ import annotations

import pytest
from dash import exceptions

from routine_finder.core.fields import COURSE_CODE, DAY, FIELDS, ROOM
from routine_finder.core.filter_state import FilterState
from routine_finder.core.query import QueryResult, query
from routine_finder.ui.callbacks.callbacks_utils import (
    cleared_inputs,
    download_frame,
    filter_store_from_inputs,
    render_result,
    run_query,
    safe_filter_state,
)
from routine_finder.ui.helpers import (
    ALL_VALUE,
    CATEGORICAL_CONTROLS,
    INACTIVE_MESSAGE,
    get_filter_dropdown_options,
    result_frame,
    result_message,
    result_records,
)
from routine_finder.ui.ids import IDs

ROWS = [
    {DAY: "Monday", COURSE_CODE: "CSE101", ROOM: "306"},
    {DAY: "Sunday", COURSE_CODE: "CSE101", ROOM: "305"},
]


def test_dropdown_options_start_with_all_choice():
    options = get_filter_dropdown_options({DAY: ["Sunday", "Monday"]})

    assert set(options) == {c.control_id for c in CATEGORICAL_CONTROLS}
    assert options[IDs.Control.DAY_SELECT] == [
        {"label": "All days", "value": ALL_VALUE},
        {"label": "Sunday", "value": "Sunday"},
        {"label": "Monday", "value": "Monday"},
    ]
    # fields with no values still offer the "all" choice
    assert options[IDs.Control.ROOM_SELECT] == [{"label": "All rooms", "value": ALL_VALUE}]


def test_result_message_distinguishes_inactive_and_empty():
    assert result_message(QueryResult.inactive()) == INACTIVE_MESSAGE
    assert result_message(QueryResult.of([])) == "0 class(es) found"
    assert result_message(QueryResult.of(ROWS)) == "2 class(es) found"


def test_result_records_fill_missing_columns():
    records = result_records(QueryResult.of([{DAY: "Sunday", ROOM: 305}]))
    assert records == [{field: "" for field in FIELDS} | {DAY: "Sunday"}]


def test_result_frame_has_all_columns_in_order():
    df = result_frame(query(ROWS, FilterState(course="CSE101")))

    assert list(df.columns) == list(FIELDS)
    assert df[DAY].tolist() == ["Sunday", "Monday"]

    empty = result_frame(QueryResult.inactive())
    assert empty.empty
    assert list(empty.columns) == list(FIELDS)


def test_safe_filter_state_handles_bad_store_data():
    assert safe_filter_state(None) == FilterState.cleared()
    assert safe_filter_state("garbage") == FilterState.cleared()
    assert safe_filter_state({"room": "305"}) == FilterState(room="305")


def test_render_result_states():
    message, records, empty_style = render_result(run_query(ROWS, None))
    assert message == INACTIVE_MESSAGE
    assert records == []
    assert empty_style == {"display": "none"}

    message, records, empty_style = render_result(run_query(ROWS, {"room": "999"}))
    assert message == "0 class(es) found"
    assert records == []
    assert empty_style == {}

    message, records, empty_style = render_result(run_query(ROWS, {"course": "CSE101"}))
    assert message == "2 class(es) found"
    assert [r[ROOM] for r in records] == ["305", "306"]
    assert empty_style == {"display": "none"}


def test_filter_store_from_inputs_normalises_search_text():
    store = filter_store_from_inputs(" CSE ", ["", "", "", "", "", ""])
    assert store == {
        "q": "cse",
        "day": "",
        "slot": "",
        "course": "",
        "teacher": "",
        "semsec": "",
        "room": "",
    }


def test_filter_store_from_inputs_maps_dropdowns_in_control_order():
    store = filter_store_from_inputs(None, ["Sunday", "Slot 1", "CSE101", "Dr. Rahman", "3A", "305"])
    assert FilterState.from_dict(store) == FilterState(
        day="Sunday",
        slot="Slot 1",
        course="CSE101",
        teacher="Dr. Rahman",
        semsec="3A",
        room="305",
    )


def test_cleared_inputs_unsets_search_and_every_dropdown():
    values = cleared_inputs()
    assert values == ("",) + ("",) * 6
    assert len(values) == 1 + len(CATEGORICAL_CONTROLS)
    assert filter_store_from_inputs(values[0], values[1:]) == FilterState.cleared().to_dict()


def test_download_frame_only_for_found_results():
    with pytest.raises(exceptions.PreventUpdate):
        download_frame(ROWS, None)
    with pytest.raises(exceptions.PreventUpdate):
        download_frame(ROWS, {"room": "999"})

    df = download_frame(ROWS, {"course": "CSE101"})
    assert list(df.columns) == list(FIELDS)
    assert df[ROOM].tolist() == ["305", "306"]
