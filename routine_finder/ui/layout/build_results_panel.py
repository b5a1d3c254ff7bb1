from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from routine_finder.core.fields import COURSE_CODE, DAY, FIELDS
from routine_finder.ui.helpers import INACTIVE_MESSAGE, NO_MATCHES_MESSAGE
from routine_finder.ui.ids import IDs

_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def build_results_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Routine"),
                        html.Span(INACTIVE_MESSAGE, id=IDs.Control.RESULT_COUNT, className="ms-auto text-muted"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dash_table.DataTable(
                        id=IDs.Control.RESULT_TABLE,
                        data=[],
                        columns=[{"name": c, "id": c} for c in FIELDS],
                        style_table={"overflowX": "auto"},
                        style_as_list_view=True,
                        style_cell={
                            "fontFamily": _FONT,
                            "fontSize": "13px",
                            "padding": "6px 8px",
                            "border": "none",
                            "textAlign": "left",
                            "whiteSpace": "normal",
                        },
                        style_header={
                            "fontFamily": _FONT,
                            "fontWeight": "600",
                            "backgroundColor": "#f3f4f6",
                            "borderBottom": "1px solid #e5e7eb",
                        },
                        style_data={"borderBottom": "1px solid #e5e7eb"},
                        style_data_conditional=[
                            {"if": {"column_id": DAY}, "fontWeight": "600"},
                            {"if": {"column_id": COURSE_CODE}, "fontWeight": "600"},
                        ],
                        sort_action="none",
                        filter_action="none",
                    ),
                    html.Div(
                        NO_MATCHES_MESSAGE,
                        id=IDs.Control.RESULT_EMPTY,
                        className="text-muted mt-2",
                        style={"display": "none"},
                    ),
                    html.Div(
                        [
                            dbc.Button(
                                "Download results (CSV)",
                                id=IDs.Control.DOWNLOAD_DATA_BTN,
                                color="secondary",
                                size="sm",
                                className="mt-2 ms-auto me-2",
                            ),
                            dcc.Download(id=IDs.Control.DOWNLOAD_DATA),
                        ],
                        className="d-flex justify-content-end align-items-center",
                    ),
                ],
            ),
        ],
        className="rf-maincard",
    )
