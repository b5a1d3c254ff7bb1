from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output

from routine_finder.ui.callbacks.callbacks_utils import render_result, run_query
from routine_finder.ui.ids import IDs

if TYPE_CHECKING:
    from routine_finder.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> count message + table
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULT_COUNT, "children"),
        Output(IDs.Control.RESULT_TABLE, "data"),
        Output(IDs.Control.RESULT_EMPTY, "style"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_results(fs_data: dict[str, Any] | None):
        result = run_query(ctx.rows, fs_data)
        logger.debug(
            "query",
            extra={"status": result.status.value, "n_rows": result.count},
        )
        return render_result(result)
