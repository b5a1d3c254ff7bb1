from __future__ import annotations

from routine_finder.core.fields import COURSE_CODE, DAY, ROOM
from routine_finder.core.filter_state import FilterState


def test_filter_state_to_from_dict_roundtrip():
    st = FilterState(
        q="cse",
        day="Sunday",
        slot="Slot 1",
        course="CSE101",
        teacher="Dr. Rahman",
        semsec="3A",
        room="305",
    )

    raw = st.to_dict()
    rebuilt = FilterState.from_dict(raw)

    assert rebuilt == st


def test_from_dict_tolerates_missing_and_none_values():
    st = FilterState.from_dict({"day": None, "room": "305", "unknown": "x"})

    assert st == FilterState(room="305")
    assert FilterState.from_dict(None) == FilterState.cleared()


def test_free_text_is_trimmed_and_lower_cased():
    assert FilterState(q="  CSE 101 ").q == "cse 101"
    assert FilterState.from_dict({"q": " Room "}).q == "room"


def test_has_any_filter():
    assert not FilterState().has_any_filter()
    assert not FilterState(q="   ").has_any_filter()
    assert FilterState(q="a").has_any_filter()
    assert FilterState(semsec="1A").has_any_filter()


def test_categorical_only_lists_set_filters():
    st = FilterState(q="x", day="Monday", course="CSE101", room="305")
    assert st.categorical() == {DAY: "Monday", COURSE_CODE: "CSE101", ROOM: "305"}


def test_cleared_has_nothing_set():
    assert FilterState.cleared().to_dict() == {
        "q": "",
        "day": "",
        "slot": "",
        "course": "",
        "teacher": "",
        "semsec": "",
        "room": "",
    }
