from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_SHEET_ID = "1Xecbn3wwH19R6yQrgvz7plNusfk2qExpFC855zVhZ0E"
DEFAULT_SHEET_NAME = "Class Schedule Data Presentation"
DEFAULT_SOURCE_URL_TEMPLATE = "https://opensheet.elk.sh/{sheet_id}/{sheet_name}"


@dataclass(frozen=True)
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - sheet_id / sheet_name: the spreadsheet tab holding the routine
    - source_url_template: formatted with sheet_id and the URL-quoted sheet_name
    - cache_root: directory for the local copy of the last good rows
    - request_timeout: seconds before the remote fetch is abandoned
    """
    ui_title: str = "Routine Finder"
    subtitle: str = "Class schedule lookup"
    sheet_id: str = DEFAULT_SHEET_ID
    sheet_name: str = DEFAULT_SHEET_NAME
    source_url_template: str = DEFAULT_SOURCE_URL_TEMPLATE
    cache_root: Path = Path("cache")
    request_timeout: float = 10.0
