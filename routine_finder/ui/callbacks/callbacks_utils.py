from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd
from dash import exceptions

from routine_finder.core.filter_state import FilterState
from routine_finder.core.query import QueryResult, QueryStatus, query
from routine_finder.ui.helpers import (
    ALL_VALUE,
    CATEGORICAL_CONTROLS,
    result_frame,
    result_message,
    result_records,
)

logger = logging.getLogger(__name__)

_HIDDEN = {"display": "none"}
_SHOWN: Dict[str, str] = {}


def safe_filter_state(data: object) -> FilterState:
    """
    Parse the filter-state store. Anything unusable is logged and read as
    "no filter", which renders the inactive message.
    """
    if data is None:
        return FilterState.cleared()
    if not isinstance(data, dict):
        logger.warning("Invalid filter-state: %r", data)
        return FilterState.cleared()
    try:
        return FilterState.from_dict(data)
    except Exception:
        logger.exception("Invalid filter-state: %r", data)
        return FilterState.cleared()


def run_query(rows: Iterable[Mapping[str, Any]], fs_data: object) -> QueryResult:
    return query(rows, safe_filter_state(fs_data))


def render_result(result: QueryResult) -> Tuple[str, List[Dict[str, str]], Dict[str, str]]:
    """(count message, table records, style of the "no matches" note)"""
    empty_style = _SHOWN if result.status is QueryStatus.EMPTY else _HIDDEN
    return result_message(result), result_records(result), empty_style


def filter_store_from_inputs(q: object, selected: Sequence[object]) -> Dict[str, Any]:
    """Search box value plus dropdown values (in CATEGORICAL_CONTROLS order) -> store data."""
    raw: Dict[str, object] = {"q": q}
    raw.update({control.key: value for control, value in zip(CATEGORICAL_CONTROLS, selected)})
    return FilterState.from_dict(raw).to_dict()


def cleared_inputs() -> Tuple[str, ...]:
    """Values for the search box followed by every dropdown, all unset."""
    return ("",) + (ALL_VALUE,) * len(CATEGORICAL_CONTROLS)


def download_frame(rows: Iterable[Mapping[str, Any]], fs_data: object) -> pd.DataFrame:
    """
    Current result as a DataFrame for CSV export.

    Raises:
        PreventUpdate: when no filter is set or nothing matched
    """
    result = run_query(rows, fs_data)
    if result.status is not QueryStatus.FOUND:
        raise exceptions.PreventUpdate
    logger.info("Downloading results", extra={"n_rows": result.count})
    return result_frame(result)
