from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from routine_finder.config.model import GlobalConfig
from routine_finder.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

_STRING_KEYS = ("ui_title", "subtitle", "sheet_id", "sheet_name", "source_url_template")


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory holding 'global.json'.

    Every key is optional and falls back to the GlobalConfig default:

    - ui_title, subtitle: navbar text
    - sheet_id, sheet_name, source_url_template: where rows are fetched from
    - cache_root: where the last good rows are kept. Relative paths are resolved
                  against the config root; ROUTINE_FINDER_CACHE_ROOT overrides it.
    - request_timeout: seconds, must be positive

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or has wrong value types.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()
    values: Dict[str, Any] = {}

    for key in _STRING_KEYS:
        value = raw_global.get(key, getattr(defaults, key))
        if not isinstance(value, str) or not value:
            raise ConfigError(f"global.json: '{key}' must be a non-empty string")
        values[key] = value

    timeout = raw_global.get("request_timeout", defaults.request_timeout)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("global.json: 'request_timeout' must be a positive number")

    return GlobalConfig(
        cache_root=_resolve_cache_root(root, raw_global.get("cache_root")),
        request_timeout=float(timeout),
        **values,
    )


def _resolve_cache_root(root: Path, cache_root_raw: Any) -> Path:
    # Env override wins, then the configured value, then the default
    env_root = os.environ.get("ROUTINE_FINDER_CACHE_ROOT")
    if env_root:
        return Path(env_root)

    if cache_root_raw is None:
        cache_root_raw = str(GlobalConfig().cache_root)
    if not isinstance(cache_root_raw, str) or not cache_root_raw:
        raise ConfigError("global.json: 'cache_root' must be a non-empty string")

    cache_path = Path(cache_root_raw)
    if cache_path.is_absolute():
        return cache_path
    return (root / cache_path).resolve()
