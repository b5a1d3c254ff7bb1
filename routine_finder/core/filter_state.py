from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from .fields import COURSE_CODE, DAY, ROOM, SEMESTER_SECTION, TEACHER, TIME_SLOT


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - q: free-text query, trimmed and lower-cased on construction
    - day, slot, course, teacher, semsec, room: exact values picked from the
      option lists, one per categorical column

    An empty string means the filter is not applied.
    """

    q: str = ""
    day: str = ""
    slot: str = ""
    course: str = ""
    teacher: str = ""
    semsec: str = ""
    room: str = ""

    def __post_init__(self) -> None:
        # the free-text query is matched case-insensitively
        object.__setattr__(self, "q", self.q.strip().lower())

    def has_any_filter(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def categorical(self) -> Dict[str, str]:
        """Set categorical filters keyed by the row column they apply to."""
        by_column = {
            DAY: self.day,
            TIME_SLOT: self.slot,
            COURSE_CODE: self.course,
            TEACHER: self.teacher,
            SEMESTER_SECTION: self.semsec,
            ROOM: self.room,
        }
        return {column: value for column, value in by_column.items() if value}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def cleared(cls) -> FilterState:
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        return cls(
            q=_text(data.get("q")),
            day=_text(data.get("day")),
            slot=_text(data.get("slot")),
            course=_text(data.get("course")),
            teacher=_text(data.get("teacher")),
            semsec=_text(data.get("semsec")),
            room=_text(data.get("room")),
        )


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""
