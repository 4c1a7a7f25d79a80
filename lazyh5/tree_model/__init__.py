"""Node model, flattening, and viewport windowing.

Defines ``Node`` and ``VisibleRow`` plus the pure functions that turn a node
tree into rows and pick the slice of rows that fits the tree pane.
"""

from __future__ import annotations

from .build import build_node, build_nodes, label_for_entity
from .flatten import (
    flatten,
    iter_nodes,
    nearest_visible_path,
    node_at_path,
    parent_path,
    row_index_for_path,
    set_expanded_all,
)
from .types import Label, LabelKind, Node, NodePath, VisibleRow
from .viewport import ViewportWindow, compute_window, row_prefix_heights

__all__ = [
    "Label",
    "LabelKind",
    "Node",
    "NodePath",
    "VisibleRow",
    "build_node",
    "build_nodes",
    "label_for_entity",
    "flatten",
    "iter_nodes",
    "nearest_visible_path",
    "node_at_path",
    "parent_path",
    "row_index_for_path",
    "set_expanded_all",
    "ViewportWindow",
    "compute_window",
    "row_prefix_heights",
]
