from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from .fields import DAY, FIELDS, TIME_SLOT, Row
from .ordering import day_rank, slot_rank

_RANKERS: Dict[str, Callable[[str], int]] = {
    DAY: day_rank,
    TIME_SLOT: slot_rank,
}


def extract_domain(rows: Iterable[Row], field: str) -> List[str]:
    """
    Distinct non-empty values of `field`, in the order the option list shows them.

    - Day: weekday order (Sunday first), unknown days last
    - Time Slot: by slot number, slots without a number last
    - anything else: plain string order

    Ranked fields keep first-seen order among equal ranks (stable sort).

    :param rows: the full row collection
    :param field: one of the six row columns
    :return: the ordered option values, without the "all" option

    Raises:
        ValueError: if field is not a row column
    """
    if field not in FIELDS:
        raise ValueError(f"Unknown field '{field}'")

    values = list(dict.fromkeys(
        value for value in (row.get(field) for row in rows)
        if isinstance(value, str) and value
    ))

    ranker = _RANKERS.get(field)
    if ranker is None:
        return sorted(values)
    return sorted(values, key=ranker)


def extract_domains(rows: Iterable[Row]) -> Dict[str, List[str]]:
    rows = list(rows)
    return {field: extract_domain(rows, field) for field in FIELDS}
