"""Localized rules text for the Klondike table."""

from __future__ import annotations

import json
import os
import textwrap
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

DEFAULT_HELP_LOCALE = "en"
DEFAULT_GAME_ID = "klondike"
_HELP_FILENAME_TEMPLATE = "help_{locale}.json"
_HELP_DIR = os.path.join(os.path.dirname(__file__), "assets", "help")


@dataclass(frozen=True)
class HelpContent:
    """Immutable rules text; each line is one paragraph, ``""`` separates sections."""

    title: str
    lines: Tuple[str, ...]
    max_width: Optional[int] = None

    def wrapped(self, width: Optional[int] = None) -> List[str]:
        """Word-wrap every paragraph to ``width`` characters, keeping blank lines."""

        width = self.max_width if width is None else width
        if width is None:
            return list(self.lines)
        if width < 1:
            raise ValueError(f"wrap width must be positive, got {width}")
        out: List[str] = []
        for paragraph in self.lines:
            if not paragraph.strip():
                out.append("")
                continue
            out.extend(textwrap.wrap(paragraph, width=width))
        return out


def _help_file_path(locale: str) -> str:
    return os.path.join(_HELP_DIR, _HELP_FILENAME_TEMPLATE.format(locale=locale))


def _entry(game_id: str, raw) -> HelpContent:
    try:
        title, lines = raw["title"], raw["lines"]
    except (TypeError, KeyError) as exc:
        raise TypeError(f"Rules entry '{game_id}' needs a 'title' and a list of 'lines'") from exc
    if not isinstance(title, str) or not isinstance(lines, list) or not all(isinstance(s, str) for s in lines):
        raise TypeError(f"Rules entry '{game_id}' must have a string title and string lines")
    max_width = raw.get("max_width")
    if max_width is not None and type(max_width) is not int:
        raise TypeError(f"Rules entry '{game_id}' has a non-integer max_width")
    return HelpContent(title=title, lines=tuple(lines), max_width=max_width)


@lru_cache()
def _load_locale(locale: str) -> Dict[str, HelpContent]:
    path = _help_file_path(locale)
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"No rules text for locale '{locale}' at {path}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"Rules file {path} must map game ids to entries")
    return {game_id: _entry(game_id, value) for game_id, value in raw.items()}


def get_help_content(game_id: str = DEFAULT_GAME_ID, *, locale: str = DEFAULT_HELP_LOCALE) -> HelpContent:
    entries = _load_locale(locale)
    if game_id not in entries:
        raise KeyError(f"No rules text for '{game_id}' in locale '{locale}'")
    return entries[game_id]


def available_help_ids(*, locale: str = DEFAULT_HELP_LOCALE) -> Tuple[str, ...]:
    return tuple(_load_locale(locale))
