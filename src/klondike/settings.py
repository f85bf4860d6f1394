# settings.py - persisted player options (draw count)
import json
import logging
import os
from typing import Dict

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = {
    "draw_count": 3,     # 1 | 3
}
_VALID_DRAW_COUNTS = (1, 3)


def _settings_dir() -> str:
    # Explicit override, then %APPDATA% on Windows, else ~/.klondike_engine
    override = os.environ.get("KLONDIKE_SETTINGS_DIR")
    if override:
        return override
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "KlondikeEngine")
    return os.path.join(os.path.expanduser("~"), ".klondike_engine")


def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def default_settings() -> Dict[str, int]:
    return dict(_DEFAULT_SETTINGS)


def _validated(data) -> Dict[str, int]:
    out = default_settings()
    if not isinstance(data, dict):
        raise ValueError("settings file must contain a JSON object")
    if "draw_count" in data:
        draw_count = data["draw_count"]
        # bool is an int subclass; reject it along with floats and None
        if type(draw_count) is not int or draw_count not in _VALID_DRAW_COUNTS:
            raise ValueError(f"draw_count must be one of {_VALID_DRAW_COUNTS}, got {draw_count}")
        out["draw_count"] = draw_count
    return out


def load_settings() -> Dict[str, int]:
    path = _settings_path()
    if not os.path.isfile(path):
        return default_settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            return _validated(json.load(f))
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings at %s: %s", path, exc)
        return default_settings()


def save_settings(new_values: dict) -> Dict[str, int]:
    # Merge and write to disk
    merged = load_settings()
    given = {k: new_values[k] for k in _DEFAULT_SETTINGS if k in new_values}
    merged.update({k: v for k, v in _validated(given).items() if k in given})
    path = _settings_path()
    try:
        os.makedirs(_settings_dir(), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(merged, f, indent=2)
    except OSError as exc:
        logger.warning("Could not write settings to %s: %s", path, exc)
    return merged
