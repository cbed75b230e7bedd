"""Load/save simulation and display settings. Settings live in configs/settings.json; grid contents are never saved."""

import json
import logging
from pathlib import Path

from world.constants import (
    DEFAULT_DECAY_FACTOR,
    DEFAULT_MAX_VALUE,
    DEFAULT_RESOLUTION_H,
    DEFAULT_RESOLUTION_W,
    DEFAULT_VALUE_CUTOFF,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
SETTINGS_FILE = CONFIG_DIR / "settings.json"

_SCALAR_KEYS = (
    "cell_size", "max_value", "value_cutoff", "decay_factor",
    "target_fps", "render_workers", "log_level",
)


def _default_config() -> dict:
    return {
        "world": {"width": DEFAULT_RESOLUTION_W, "height": DEFAULT_RESOLUTION_H},
        "cell_size": 2,
        "max_value": DEFAULT_MAX_VALUE,
        "value_cutoff": DEFAULT_VALUE_CUTOFF,
        "decay_factor": DEFAULT_DECAY_FACTOR,
        "target_fps": 60,
        "render_workers": 1,
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if isinstance(data.get("world"), dict):
        d["world"] = {**d["world"], **{k: v for k, v in data["world"].items() if k in d["world"]}}
    for k in _SCALAR_KEYS:
        if k in data:
            d[k] = data[k]
    return d


def load_config(path: Path | str | None = None) -> dict:
    """Settings from path (default configs/settings.json) merged over defaults."""
    p = Path(path) if path is not None else SETTINGS_FILE
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s (%s); using defaults", p, e)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("Settings in %s are not a JSON object; using defaults", p)
        return _default_config()
    return _merge_defaults(data)


def save_config(params: dict, path: Path | str | None = None) -> Path:
    p = Path(path) if path is not None else SETTINGS_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(_merge_defaults(params), f, indent=2)
    return p
