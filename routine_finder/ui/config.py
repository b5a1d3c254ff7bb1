from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from routine_finder.config.model import GlobalConfig
from routine_finder.services.schedule_source import RowOrigin


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    # Loaded once per app start and never mutated afterwards
    rows: List[Mapping[str, Any]] = field(default_factory=list)
    domains: Dict[str, List[str]] = field(default_factory=dict)
    origin: RowOrigin = RowOrigin.EMPTY
