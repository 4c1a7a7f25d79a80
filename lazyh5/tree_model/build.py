"""Node-tree construction from loader entities."""

from __future__ import annotations

from collections.abc import Iterable

from ..entity import Container, Entity, Leaf
from .types import Label, LabelKind, Node


def label_for_entity(entity: Entity) -> Label:
    """Return the tree label for one entity."""
    if isinstance(entity, Container):
        return Label(entity.name, LabelKind.GROUP)
    if isinstance(entity, Leaf):
        return Label(entity.name, LabelKind.LEAF)
    raise TypeError(f"unknown entity type: {type(entity).__name__}")


def build_node(entity: Entity, expanded: bool = True) -> Node:
    """Build the node subtree mirroring ``entity`` and its descendants."""
    children: list[Node] = []
    if isinstance(entity, Container):
        children = [build_node(child, expanded) for child in entity.children]
    return Node(label_for_entity(entity), children, expanded=expanded)


def build_nodes(entities: Iterable[Entity], expanded: bool = True) -> list[Node]:
    """Build root nodes for a root entity sequence, preserving order."""
    return [build_node(entity, expanded) for entity in entities]
