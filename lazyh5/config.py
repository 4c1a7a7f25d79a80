"""Persistent JSON config helpers.

Stores the UI theme, split-pane width, and search case preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "lazyh5"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_LEFT_PANE_PERCENT = 40.0


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("could not write config %s: %s", CONFIG_PATH, exc)


def load_left_pane_percent() -> float | None:
    """Read the tree-pane width percentage, constrained to (0, 100)."""
    value = load_config().get("left_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def save_left_pane_percent(total_width: int, left_width: int) -> None:
    """Store the tree-pane width as a percentage clamped to ``[1.0, 99.0]``."""
    if total_width <= 0:
        return
    percent = max(1.0, min(99.0, (left_width / total_width) * 100.0))
    config = load_config()
    config["left_pane_percent"] = round(percent, 2)
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_search_ignore_case() -> bool:
    """Return whether search ignores case; only explicit booleans count."""
    value = load_config().get("search_ignore_case")
    return value if isinstance(value, bool) else False


@dataclass(frozen=True)
class ViewerConfig:
    """Snapshot of every setting a session reads at startup."""

    theme_name: str = "default"
    no_color: bool = False
    left_pane_percent: float = DEFAULT_LEFT_PANE_PERCENT
    search_ignore_case: bool = False

    @classmethod
    def load(cls, no_color: bool = False) -> ViewerConfig:
        percent = load_left_pane_percent()
        return cls(
            theme_name=normalize_theme_name(load_theme_name()),
            no_color=no_color,
            left_pane_percent=percent if percent is not None else DEFAULT_LEFT_PANE_PERCENT,
            search_ignore_case=load_search_ignore_case(),
        )

    def left_width(self, total_width: int) -> int:
        """Return the tree-pane column count for ``total_width``.

        At least one column is left for each pane when there is room.
        """
        if total_width <= 1:
            return max(0, total_width)
        width = int(total_width * self.left_pane_percent / 100.0)
        return max(1, min(width, total_width - 2))
