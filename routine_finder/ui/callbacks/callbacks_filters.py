from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output

from routine_finder.ui.callbacks.callbacks_utils import cleared_inputs, filter_store_from_inputs
from routine_finder.ui.helpers import CATEGORICAL_CONTROLS
from routine_finder.ui.ids import IDs

if TYPE_CHECKING:
    from routine_finder.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Filter inputs -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        *[Input(control.control_id, "value") for control in CATEGORICAL_CONTROLS],
    )
    def sync_filter_state(q, *selected):
        return filter_store_from_inputs(q, selected)

    # ---------------------------------------------------------
    # Reset button clears every input
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        *[Output(control.control_id, "value") for control in CATEGORICAL_CONTROLS],
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        logger.info("Filters reset")
        return cleared_inputs()
