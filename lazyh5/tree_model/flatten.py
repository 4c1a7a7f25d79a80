"""Flattening of the node tree into ordered visible rows.

Rows follow depth-first pre-order in declaration order. A collapsed node is
emitted but its subtree is skipped. Search only annotates rows; it never adds,
removes, or expands anything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from .types import Node, NodePath, VisibleRow


def flatten(
    roots: Sequence[Node],
    match: Callable[[str], bool] | None = None,
) -> list[VisibleRow]:
    """Return visible rows for ``roots`` under the current expand flags.

    ``match`` is the active search predicate, tested against each emitted
    row's own label text.
    """
    rows: list[VisibleRow] = []

    def walk(nodes: Sequence[Node], prefix: NodePath) -> None:
        for index, node in enumerate(nodes):
            path = prefix + (index,)
            is_match = bool(match(node.label.text)) if match is not None else False
            rows.append(VisibleRow(path, node.label, is_match))
            if node.children and node.expanded:
                walk(node.children, path)

    walk(roots, ())
    return rows


def iter_nodes(roots: Sequence[Node]) -> Iterator[tuple[NodePath, Node]]:
    """Yield ``(path, node)`` for every node, ignoring expand flags."""
    stack: list[tuple[NodePath, Node]] = [((index,), node) for index, node in enumerate(roots)]
    stack.reverse()
    while stack:
        path, node = stack.pop()
        yield path, node
        stack.extend(
            (path + (index,), child)
            for index, child in reversed(list(enumerate(node.children)))
        )


def node_at_path(roots: Sequence[Node], path: NodePath) -> Node | None:
    """Return the node addressed by ``path`` or ``None`` when it does not exist."""
    if not path:
        return None
    nodes = roots
    node: Node | None = None
    for index in path:
        if index < 0 or index >= len(nodes):
            return None
        node = nodes[index]
        nodes = node.children
    return node


def parent_path(path: NodePath) -> NodePath | None:
    """Return the parent's path, or ``None`` for top-level nodes."""
    if len(path) <= 1:
        return None
    return path[:-1]


def set_expanded_all(roots: Sequence[Node], expanded: bool) -> None:
    """Set ``expanded`` on every collapsible node."""
    for _path, node in iter_nodes(roots):
        if node.collapsible:
            node.expanded = expanded


def row_index_for_path(rows: Sequence[VisibleRow], path: NodePath) -> int | None:
    """Return the row index showing ``path``, if it is visible."""
    for index, row in enumerate(rows):
        if row.path == path:
            return index
    return None


def nearest_visible_path(roots: Sequence[Node], path: NodePath) -> NodePath:
    """Return ``path`` or its closest ancestor that is visible.

    A node is visible when every ancestor is expanded, so this walks down
    ``path`` and stops at the first collapsed node.
    """
    nodes = roots
    visible: list[int] = []
    for index in path:
        if index < 0 or index >= len(nodes):
            break
        visible.append(index)
        node = nodes[index]
        if not node.expanded:
            break
        nodes = node.children
    return tuple(visible)
