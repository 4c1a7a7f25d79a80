"""Top-level viewing session over one loaded file.

The session owns the source hierarchy, the node tree built from it, and the
navigator for its whole lifetime. ``frame`` is the read side of one interaction
cycle: flatten, window, format, and resolve the selection for the detail pane.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .ansi import pad_ansi_line
from .config import ViewerConfig
from .detail import detail_lines, entity_path_text, header_line
from .entity import Entity, SourceFile
from .errors import ResolutionError
from .keys import handle_key
from .navigation import InputMode, TreeNavigator
from .rendering import RenderedRow, render_tree_rows, tree_pane_lines
from .resolver import resolve
from .search import SearchFilter
from .tree_model import ViewportWindow, build_nodes
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)

DIVIDER = "│"


@dataclass(frozen=True)
class Frame:
    """Everything a painter needs for one screen."""

    header: str
    tree_rows: tuple[RenderedRow, ...]
    tree_lines: tuple[str, ...]
    detail_lines: tuple[str, ...]
    status: str
    window: ViewportWindow
    selected: Entity | None
    left_width: int
    height: int

    def screen_lines(self) -> list[str]:
        """Compose header, split panes, and status into at most ``height`` lines.

        Screens shorter than three lines keep the header and tree pane first.
        """
        lines = [self.header]
        for idx, tree_line in enumerate(self.tree_lines):
            detail = self.detail_lines[idx] if idx < len(self.detail_lines) else ""
            lines.append(f"{pad_ansi_line(tree_line, self.left_width)}{DIVIDER}{detail}")
        lines.append(self.status)
        return lines[: max(0, self.height)]


class Session:
    """Owns one file's tree, navigation state, and presentation settings."""

    def __init__(self, source: SourceFile, config: ViewerConfig | None = None) -> None:
        self.source = source
        self.config = config if config is not None else ViewerConfig()
        self.theme: UITheme = resolve_theme(self.config.theme_name, no_color=self.config.no_color)
        self.navigator = TreeNavigator(
            build_nodes(source.roots),
            search=SearchFilter(ignore_case=self.config.search_ignore_case),
        )

    @property
    def quit_requested(self) -> bool:
        return self.navigator.state.quit_requested

    def handle_key(self, key: str) -> bool:
        return handle_key(self.navigator, key)

    def selected_entity(self) -> Entity | None:
        """Resolve the selected row against the source hierarchy.

        Raises ``ResolutionError`` when rows and source disagree; that is a bug,
        not a user error, so it is never papered over.
        """
        path = self.navigator.selected_path()
        if path is None:
            return None
        try:
            return resolve(self.source.roots, path)
        except ResolutionError:
            logger.error("selected row %s does not resolve in %s", list(path), self.source.name)
            raise

    def status_line(self, width: int) -> str:
        theme = self.theme
        state = self.navigator.state
        if state.input_mode is InputMode.SEARCH_ENTRY:
            text = f"{theme.status_query}/{state.search_buffer}{theme.reset}"
        elif self.navigator.search_active:
            count = self.navigator.match_count()
            noun = "match" if count == 1 else "matches"
            text = (
                f"{theme.status_query}/{self.navigator.search.pattern}{theme.reset}"
                f"{theme.status_hint}  {count} {noun} · n/N jump · esc clear{theme.reset}"
            )
        else:
            text = f"{theme.status_hint}j/k move · h/l fold · / search · q quit{theme.reset}"
        return pad_ansi_line(text, width)

    def frame(self, width: int, height: int) -> Frame:
        """Lay out one screen of ``width`` x ``height`` cells.

        One line goes to the header and one to the status bar; the rest is
        split between the tree pane and the detail pane.
        """
        width = max(1, width)
        pane_height = max(1, height - 2)
        left_width = self.config.left_width(width)
        detail_width = max(0, width - left_width - len(DIVIDER))

        navigator = self.navigator
        window = navigator.layout(pane_height)
        rows = render_tree_rows(
            navigator.rows(),
            window,
            navigator.state.selection_row,
            navigator.roots,
            search_active=navigator.search_active,
            width=left_width,
            theme=self.theme,
            matcher=navigator.search.matcher,
        )

        selected = self.selected_entity()
        details: list[str] = []
        if selected is not None:
            path = navigator.selected_path() or ()
            location = entity_path_text(self.source.roots, path)
            details = [
                pad_ansi_line(line, detail_width)
                for line in detail_lines(selected, location, self.theme)[:pane_height]
            ]

        return Frame(
            header=header_line(self.source, width, self.theme),
            tree_rows=tuple(rows),
            tree_lines=tuple(tree_pane_lines(rows, pane_height)),
            detail_lines=tuple(details),
            status=self.status_line(width),
            window=window,
            selected=selected,
            left_width=left_width,
            height=max(0, height),
        )
