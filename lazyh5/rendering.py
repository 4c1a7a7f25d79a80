"""Tree-pane row formatting.

Only rows inside the current viewport window are formatted. Each row keeps its
node path and depth so a painter can place it; lines are ANSI-styled and
clipped to the pane width.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .ansi import clip_ansi_line
from .search import SearchMatcher
from .tree_model import LabelKind, Node, NodePath, ViewportWindow, VisibleRow, node_at_path
from .ui_theme import DEFAULT_THEME, UITheme

_SIZE_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


class RowStyle(str, Enum):
    NORMAL = "normal"
    SELECTED = "selected"
    SEARCH_MATCH = "search_match"


@dataclass(frozen=True)
class RenderedRow:
    """Painted form of one visible row."""

    path: NodePath
    depth: int
    style: RowStyle
    lines: tuple[str, ...]


def format_size(num_bytes: int) -> str:
    """Format a byte count with binary units, e.g. ``1.50 KiB``."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    value = float(num_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= 1024.0
        if value < 1024.0:
            break
    return f"{value:.2f} {unit}"


def row_style(row_index: int, row: VisibleRow, selection_row: int, search_active: bool) -> RowStyle:
    """Return the style for one row.

    While a search is active the selection highlight is replaced by match
    highlighting; the two are never combined.
    """
    if search_active:
        return RowStyle.SEARCH_MATCH if row.is_search_match else RowStyle.NORMAL
    if row_index == selection_row:
        return RowStyle.SELECTED
    return RowStyle.NORMAL


def _highlight_span(text: str, matcher: SearchMatcher | None, theme: UITheme, resume: str) -> str:
    if matcher is None:
        return text
    span = matcher.span(text)
    if span is None:
        return text
    start, end = span
    return text[:start] + theme.tree_search_span + text[start:end] + theme.reset + resume + text[end:]


def format_row(
    row: VisibleRow,
    style: RowStyle,
    node: Node | None,
    theme: UITheme | None = None,
    matcher: SearchMatcher | None = None,
) -> list[str]:
    """Render one row as ANSI-styled lines.

    Groups get an expand marker; continuation lines of a multi-line label are
    aligned under the first line's text.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    indent = "  " * max(0, row.depth - 1)
    if row.label.kind is LabelKind.GROUP and node is not None and node.collapsible:
        marker = "▾ " if node.expanded else "▸ "
    else:
        marker = "  "

    if style is RowStyle.SELECTED:
        color = active_theme.tree_selected
    elif style is RowStyle.SEARCH_MATCH:
        color = active_theme.tree_search_match
    elif row.label.kind is LabelKind.GROUP:
        color = active_theme.tree_group
    else:
        color = active_theme.tree_leaf

    lines: list[str] = []
    for line_idx, text in enumerate(row.label.lines):
        if style is RowStyle.SEARCH_MATCH:
            text = _highlight_span(text, matcher, active_theme, color)
        if line_idx == 0:
            lines.append(f"{indent}{active_theme.tree_marker}{marker}{reset}{color}{text}{reset}")
        else:
            lines.append(f"{indent}  {color}{text}{reset}")
    return lines


def render_tree_rows(
    rows: Sequence[VisibleRow],
    window: ViewportWindow,
    selection_row: int,
    roots: Sequence[Node],
    search_active: bool = False,
    width: int = 80,
    theme: UITheme | None = None,
    matcher: SearchMatcher | None = None,
) -> list[RenderedRow]:
    """Format rows ``[window.start_row, window.end_row)`` for the tree pane."""
    rendered: list[RenderedRow] = []
    end = min(window.end_row, len(rows))
    for row_index in range(max(0, window.start_row), end):
        row = rows[row_index]
        style = row_style(row_index, row, selection_row, search_active)
        lines = format_row(row, style, node_at_path(roots, row.path), theme, matcher)
        rendered.append(
            RenderedRow(
                path=row.path,
                depth=row.depth,
                style=style,
                lines=tuple(clip_ansi_line(line, width) for line in lines),
            )
        )
    return rendered


def tree_pane_lines(rendered: Sequence[RenderedRow], height: int) -> list[str]:
    """Stack rendered rows into exactly ``height`` pane lines.

    A row taller than the pane is clipped at the bottom edge.
    """
    lines: list[str] = []
    for row in rendered:
        lines.extend(row.lines)
    lines = lines[: max(0, height)]
    lines.extend("" for _ in range(max(0, height) - len(lines)))
    return lines
