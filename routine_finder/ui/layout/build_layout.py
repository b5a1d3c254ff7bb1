from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from routine_finder.core.filter_state import FilterState
from routine_finder.ui.ids import IDs
from routine_finder.ui.layout.build_filter_panel import build_filter_panel
from routine_finder.ui.layout.build_navbar import build_navbar
from routine_finder.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from routine_finder.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    navbar = build_navbar(ctx.global_config, ctx.origin, len(ctx.rows))

    return dbc.Container(
        fluid=True,
        className="rf-root",
        children=[
            navbar,

            # Filter state lives in the page, not in the server process
            dcc.Store(id=IDs.Store.FILTER_STATE, data=FilterState.cleared().to_dict()),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(ctx.domains), md=3, className="mt-3"),
                    dbc.Col(build_results_panel(), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
