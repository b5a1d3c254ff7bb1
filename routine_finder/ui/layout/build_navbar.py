from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from routine_finder.config.model import GlobalConfig
from routine_finder.services.schedule_source import RowOrigin
from routine_finder.ui.ids import IDs

_ORIGIN_BADGES = {
    RowOrigin.REMOTE: ("Live sheet", "success"),
    RowOrigin.CACHE: ("Offline copy", "warning"),
    RowOrigin.EMPTY: ("No data", "danger"),
}


def build_navbar(global_config: GlobalConfig, origin: RowOrigin, n_rows: int) -> dbc.Navbar:
    badge_text, badge_color = _ORIGIN_BADGES[origin]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        dbc.Badge(badge_text, color=badge_color, id=IDs.Control.SOURCE_BADGE, className="me-2"),
                        html.Small(f"{n_rows} rows loaded", className="text-muted"),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm rf-navbar",
    )
