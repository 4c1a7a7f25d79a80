"""Source-hierarchy entity types handed over by the file loader.

An entity is either a ``Container`` (an HDF5 group) or a ``Leaf`` (a dataset).
The engine only reads names and nesting; the remaining metadata is payload for
the detail pane.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class LinkKind(str, Enum):
    """How the parent group refers to an entity."""

    HARD = "hard"
    SOFT = "soft"
    EXTERNAL = "external"


class StorageLayout(str, Enum):
    """Dataset storage layout."""

    COMPACT = "compact"
    CONTIGUOUS = "contiguous"
    CHUNKED = "chunked"
    VIRTUAL = "virtual"


@dataclass(frozen=True)
class Filter:
    """One stage of a dataset's filter pipeline (compression, shuffle, ...)."""

    name: str
    options: tuple[int, ...] = ()


@dataclass(frozen=True)
class Container:
    """Group entity with ordered children."""

    name: str
    children: tuple[Entity, ...] = ()
    link: LinkKind = LinkKind.HARD
    attributes: dict[str, object] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class Leaf:
    """Dataset entity; never has children."""

    name: str
    size: int = 0
    shape: tuple[int, ...] = ()
    dtype: str = ""
    layout: StorageLayout = StorageLayout.CONTIGUOUS
    chunks: tuple[int, ...] | None = None
    filters: tuple[Filter, ...] = ()
    link: LinkKind = LinkKind.HARD
    attributes: dict[str, object] = field(default_factory=dict, compare=False)


Entity = Union[Container, Leaf]


def is_container(entity: Entity) -> bool:
    """Return whether ``entity`` may have children."""
    if isinstance(entity, Container):
        return True
    if isinstance(entity, Leaf):
        return False
    raise TypeError(f"unknown entity type: {type(entity).__name__}")


@dataclass(frozen=True)
class SourceFile:
    """A loaded file: display name, size in bytes, and its root entities."""

    name: str
    size: int
    roots: tuple[Entity, ...] = ()
