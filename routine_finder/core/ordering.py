"""
Ordering primitives shared by the domain extractor and the query engine.
"""
from __future__ import annotations

import re
from typing import Any, Dict

DAY_ORDER: Dict[str, int] = {
    "Sunday": 1,
    "Monday": 2,
    "Tuesday": 3,
    "Wednesday": 4,
    "Thursday": 5,
    "Friday": 6,
    "Saturday": 7,
}

UNKNOWN_DAY_RANK = 99

# Larger than any real slot number; unranked slots sort last
UNRANKED_SLOT = 9999

# ASCII digits only: "Slot ৩" is unranked
_SLOT_RE = re.compile(r"slot\s*([0-9]+)", re.IGNORECASE)


def day_rank(day: Any) -> int:
    if not isinstance(day, str):
        return UNKNOWN_DAY_RANK
    return DAY_ORDER.get(day, UNKNOWN_DAY_RANK)


def slot_rank(slot: Any) -> int:
    """
    Number following the first occurrence of the word "slot", e.g.
    "Slot 3 (10:00-11:20)" -> 3. Returns UNRANKED_SLOT when there is none.
    """
    if not isinstance(slot, str):
        return UNRANKED_SLOT
    match = _SLOT_RE.search(slot)
    if match is None:
        return UNRANKED_SLOT
    return int(match.group(1))
