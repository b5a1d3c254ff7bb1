from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Filters
        SEARCH_INPUT = "q"
        DAY_SELECT = "day"
        SLOT_SELECT = "slot"
        COURSE_SELECT = "course"
        TEACHER_SELECT = "teacher"
        SEMSEC_SELECT = "semsec"
        ROOM_SELECT = "room"
        RESET_BTN = "reset"

        # Results
        RESULT_COUNT = "count"
        RESULT_TABLE = "result-table"
        RESULT_EMPTY = "result-empty"
        DOWNLOAD_DATA = "download-data"
        DOWNLOAD_DATA_BTN = "download-data-btn"

        # Navbar
        SOURCE_BADGE = "source-badge"
