from __future__ import annotations

from typing import Dict, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from routine_finder.ui.helpers import ALL_VALUE, CATEGORICAL_CONTROLS, get_filter_dropdown_options
from routine_finder.ui.ids import IDs


def build_filter_panel(domains: Dict[str, List[str]]) -> dbc.Card:
    options_by_id = get_filter_dropdown_options(domains)

    dropdowns = [
        html.Div(
            [
                html.Label(control.label, className="form-label", htmlFor=control.control_id),
                dcc.Dropdown(
                    id=control.control_id,
                    options=options_by_id[control.control_id],
                    value=ALL_VALUE,
                    clearable=False,
                    className="mb-3",
                ),
            ],
        )
        for control in CATEGORICAL_CONTROLS
    ]

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Search", className="form-label", htmlFor=IDs.Control.SEARCH_INPUT),
                    dbc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="search",
                        value="",
                        placeholder="Course, teacher, room…",
                        debounce=False,
                        className="mb-3",
                    ),
                    *dropdowns,
                    dbc.Button(
                        "Reset",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        outline=True,
                        size="sm",
                        className="w-100",
                    ),
                ]
            ),
        ],
        className="rf-sidebar",
    )
