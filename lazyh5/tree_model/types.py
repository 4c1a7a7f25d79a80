"""Node-model datatypes shared by the flattener, viewport, and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NodePath = tuple[int, ...]


class LabelKind(str, Enum):
    """Display colour class of a row label."""

    GROUP = "group"
    LEAF = "leaf"


@dataclass(frozen=True)
class Label:
    """Row text plus its colour class. Text may span several lines."""

    text: str
    kind: LabelKind = LabelKind.LEAF

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def height(self) -> int:
        return max(1, self.text.count("\n") + 1)


@dataclass
class Node:
    """One tree node. Only ``expanded`` changes after construction."""

    label: Label
    children: list[Node] = field(default_factory=list)
    expanded: bool = True

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def collapsible(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class VisibleRow:
    """One flattened row: node path, label, and whether the search matched it."""

    path: NodePath
    label: Label
    is_search_match: bool = False

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def height(self) -> int:
        return self.label.height
