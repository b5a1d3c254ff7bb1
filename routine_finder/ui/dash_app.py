from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
import httpx
from dash import Dash

from routine_finder.config.loader import load_global_config
from routine_finder.core.domains import extract_domains
from routine_finder.services.schedule_source import ScheduleSource
from routine_finder.services.storage import LocalFileSystemStorage, StorageBackend
from routine_finder.ui.callbacks.callbacks_filters import register_filter_callbacks
from routine_finder.ui.callbacks.callbacks_io import register_io_callbacks
from routine_finder.ui.callbacks.callbacks_render import register_render_callbacks
from routine_finder.ui.config import AppConfig
from routine_finder.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    client: Optional[httpx.Client] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load rows once; every later query runs on this same collection
    storage: Optional[StorageBackend]
    try:
        storage = LocalFileSystemStorage(global_config.cache_root)
    except OSError:
        logger.exception(
            "Row cache unavailable; continuing without it",
            extra={"cache_root": str(global_config.cache_root)},
        )
        storage = None

    source = ScheduleSource(global_config, storage, client=client)
    loaded = source.load_rows()

    # 3) Option lists are static for the lifetime of the app
    domains = extract_domains(loaded.rows)

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        rows=loaded.rows,
        domains=domains,
        origin=loaded.origin,
    )

    logger.info(
        "Routine loaded",
        extra={
            "origin": loaded.origin.value,
            "n_rows": len(loaded.rows),
            "n_options": {field: len(values) for field, values in domains.items()},
        },
    )

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)
    register_io_callbacks(app, ctx)

    return app
