from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc

from routine_finder.ui.callbacks.callbacks_utils import download_frame
from routine_finder.ui.ids import IDs

if TYPE_CHECKING:
    from routine_finder.ui.config import AppConfig

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "routine.csv"


def register_io_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Download current result as CSV
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_DATA, "data"),
        Input(IDs.Control.DOWNLOAD_DATA_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_results(_n_clicks, fs_data):
        df = download_frame(ctx.rows, fs_data)
        return dcc.send_data_frame(df.to_csv, DOWNLOAD_FILENAME, index=False)
