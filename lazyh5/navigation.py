"""Navigation state machine for the tree pane.

``TreeNavigator`` is the only mutator of selection, expand flags, and search.
Every operation clamps instead of failing; on an empty tree they are no-ops.
Operations return whether they changed anything so callers know to redraw.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .errors import PatternError
from .search import SearchFilter
from .tree_model import (
    Node,
    NodePath,
    ViewportWindow,
    VisibleRow,
    compute_window,
    flatten,
    nearest_visible_path,
    node_at_path,
    parent_path,
    row_index_for_path,
    set_expanded_all,
)


class InputMode(str, Enum):
    """Which key set is active."""

    NORMAL = "normal"
    SEARCH_ENTRY = "search"


@dataclass
class NavigationState:
    """Mutable per-tree UI state threaded through the event loop."""

    selection_row: int = 0
    window: ViewportWindow = field(default_factory=ViewportWindow)
    input_mode: InputMode = InputMode.NORMAL
    search_buffer: str = ""
    quit_requested: bool = False


class TreeNavigator:
    """Owns the node roots, navigation state, and search filter for one tree.

    Visible rows are derived lazily and dropped after every mutation, so a row
    sequence computed before an expand/collapse or search edit is never used
    afterwards.
    """

    def __init__(
        self,
        roots: Sequence[Node],
        search: SearchFilter | None = None,
        state: NavigationState | None = None,
    ) -> None:
        self.roots = list(roots)
        self.search = search if search is not None else SearchFilter()
        self.state = state if state is not None else NavigationState()
        self._rows: list[VisibleRow] | None = None
        self._clamp_selection()

    def rows(self) -> list[VisibleRow]:
        if self._rows is None:
            self._rows = flatten(self.roots, self.search.matcher)
        return self._rows

    def _invalidate(self) -> None:
        self._rows = None
        self._clamp_selection()

    def _clamp_selection(self) -> None:
        row_count = len(self.rows())
        if row_count == 0:
            self.state.selection_row = 0
        else:
            self.state.selection_row = max(0, min(self.state.selection_row, row_count - 1))

    def selected_row(self) -> VisibleRow | None:
        rows = self.rows()
        if not rows:
            return None
        return rows[self.state.selection_row]

    def selected_path(self) -> NodePath | None:
        row = self.selected_row()
        return row.path if row is not None else None

    def _select_path(self, path: NodePath) -> None:
        """Select ``path`` or, when it is hidden, its nearest visible ancestor."""
        target = nearest_visible_path(self.roots, path)
        index = row_index_for_path(self.rows(), target)
        if index is not None:
            self.state.selection_row = index
        self._clamp_selection()

    @property
    def search_active(self) -> bool:
        return self.search.active

    @property
    def page_size(self) -> int:
        """Rows in the last computed window, at least one."""
        return max(1, len(self.state.window))

    def layout(self, display_height: int) -> ViewportWindow:
        """Recompute and store the viewport window for ``display_height``."""
        rows = self.rows()
        window = compute_window(
            [row.height for row in rows],
            self.state.selection_row,
            self.state.window.start_row,
            display_height,
        )
        self.state.window = window
        return window

    def match_count(self) -> int:
        return sum(1 for row in self.rows() if row.is_search_match)

    def _normal(self) -> bool:
        return self.state.input_mode is InputMode.NORMAL

    def move_by(self, delta: int) -> bool:
        rows = self.rows()
        if not self._normal() or not rows:
            return False
        previous = self.state.selection_row
        self.state.selection_row = max(0, min(previous + delta, len(rows) - 1))
        return self.state.selection_row != previous

    def move_up(self) -> bool:
        return self.move_by(-1)

    def move_down(self) -> bool:
        return self.move_by(1)

    def page_up(self) -> bool:
        return self.move_by(-self.page_size)

    def page_down(self) -> bool:
        return self.move_by(self.page_size)

    def set_expanded(self, path: NodePath, expanded: bool) -> bool:
        """Set the expand flag of the node at ``path`` and keep the selection.

        The selected node stays selected when still visible; otherwise its
        nearest visible ancestor takes over.
        """
        node = node_at_path(self.roots, path)
        if node is None or not node.collapsible or node.expanded == expanded:
            return False
        selected = self.selected_path()
        node.expanded = expanded
        self._invalidate()
        if selected is not None:
            self._select_path(selected)
        return True

    def expand(self) -> bool:
        """Expand the selected node, or step into it when already expanded."""
        path = self.selected_path()
        if not self._normal() or path is None:
            return False
        node = node_at_path(self.roots, path)
        if node is None or node.is_leaf:
            return False
        if not node.expanded:
            return self.set_expanded(path, True)
        return self.move_by(1)

    def collapse(self) -> bool:
        """Collapse the selected node, or select its parent when already collapsed."""
        path = self.selected_path()
        if not self._normal() or path is None:
            return False
        node = node_at_path(self.roots, path)
        if node is not None and node.collapsible and node.expanded:
            return self.set_expanded(path, False)
        parent = parent_path(path)
        if parent is None:
            return False
        previous = self.state.selection_row
        self._select_path(parent)
        return self.state.selection_row != previous

    def _set_all(self, expanded: bool) -> bool:
        if not self._normal() or not self.rows():
            return False
        selected = self.selected_path()
        before = [row.path for row in self.rows()]
        set_expanded_all(self.roots, expanded)
        self._invalidate()
        if selected is not None:
            self._select_path(selected)
        return [row.path for row in self.rows()] != before

    def expand_all(self) -> bool:
        return self._set_all(True)

    def collapse_all(self) -> bool:
        return self._set_all(False)

    def _step_to_match(self, direction: int) -> bool:
        rows = self.rows()
        if not self._normal() or not rows or not self.search.active:
            return False
        count = len(rows)
        for offset in range(1, count + 1):
            index = (self.state.selection_row + direction * offset) % count
            if rows[index].is_search_match:
                previous = self.state.selection_row
                self.state.selection_row = index
                return index != previous
        return False

    def next_match(self) -> bool:
        return self._step_to_match(1)

    def previous_match(self) -> bool:
        return self._step_to_match(-1)

    def quit(self) -> bool:
        if not self._normal():
            return False
        self.state.quit_requested = True
        return True

    def enter_search(self) -> bool:
        """Switch to search entry with an empty pattern (highlights nothing)."""
        if not self._normal():
            return False
        self.search.set_search("")
        self.state.input_mode = InputMode.SEARCH_ENTRY
        self.state.search_buffer = ""
        self._invalidate()
        return True

    def _apply_search_buffer(self, buffer: str) -> bool:
        if self.state.input_mode is not InputMode.SEARCH_ENTRY:
            return False
        try:
            self.search.set_search(buffer)
        except PatternError:
            return False
        self.state.search_buffer = buffer
        self._invalidate()
        return True

    def search_input(self, char: str) -> bool:
        """Append ``char`` to the pattern; rolled back when it does not compile."""
        return self._apply_search_buffer(self.state.search_buffer + char)

    def search_backspace(self) -> bool:
        """Drop the last pattern character; rolled back when it does not compile."""
        if not self.state.search_buffer:
            return False
        return self._apply_search_buffer(self.state.search_buffer[:-1])

    def accept_search(self) -> bool:
        """Return to normal mode keeping the current highlight."""
        if self.state.input_mode is not InputMode.SEARCH_ENTRY:
            return False
        self.state.input_mode = InputMode.NORMAL
        if not self.state.search_buffer:
            self.search.set_search(None)
            self._invalidate()
        return True

    def cancel_search(self) -> bool:
        """Return to normal mode and clear the search."""
        if self.state.input_mode is not InputMode.SEARCH_ENTRY:
            return False
        self.state.input_mode = InputMode.NORMAL
        self.state.search_buffer = ""
        self.search.set_search(None)
        self._invalidate()
        return True

    def clear_search(self) -> bool:
        """Drop an accepted search highlight from normal mode."""
        if not self._normal() or not self.search.active:
            return False
        self.state.search_buffer = ""
        self.search.set_search(None)
        self._invalidate()
        return True
