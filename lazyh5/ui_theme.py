"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree pane, detail pane, and header.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    tree_marker: str
    tree_group: str
    tree_leaf: str
    tree_selected: str
    tree_search_match: str
    tree_search_span: str
    detail_heading: str
    detail_key: str
    detail_value: str
    detail_dim: str
    header_name: str
    header_size: str
    status_query: str
    status_hint: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_group="\033[1;34m",
    tree_leaf="\033[38;5;252m",
    tree_selected="\033[1;30;47m",
    tree_search_match="\033[1;38;5;229m",
    tree_search_span="\033[7;1m",
    detail_heading="\033[1;38;5;81m",
    detail_key="\033[38;5;109m",
    detail_value="\033[38;5;252m",
    detail_dim="\033[2;38;5;250m",
    header_name="\033[1;38;5;81m",
    header_size="\033[38;5;109m",
    status_query="\033[1;38;5;81m",
    status_hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_group="\033[1;38;5;45m",
    tree_leaf="\033[38;5;153m",
    tree_selected="\033[1;30;48;5;45m",
    tree_search_match="\033[1;38;5;215m",
    tree_search_span="\033[7;1m",
    detail_heading="\033[1;38;5;45m",
    detail_key="\033[38;5;73m",
    detail_value="\033[38;5;153m",
    detail_dim="\033[2;38;5;110m",
    header_name="\033[1;38;5;45m",
    header_size="\033[38;5;73m",
    status_query="\033[1;38;5;45m",
    status_hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    tree_marker="",
    tree_group="",
    tree_leaf="",
    tree_selected="",
    tree_search_match="",
    tree_search_span="",
    detail_heading="",
    detail_key="",
    detail_value="",
    detail_dim="",
    header_name="",
    header_size="",
    status_query="",
    status_hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
