"""Map a node path back onto the source hierarchy."""

from __future__ import annotations

from collections.abc import Sequence

from .entity import Container, Entity, Leaf
from .errors import InvalidDescent, NotFound


def resolve(roots: Sequence[Entity], path: Sequence[int]) -> Entity:
    """Return the entity addressed by ``path``, one child index per depth.

    Raises ``NotFound`` when an index is out of range (or the path is empty)
    and ``InvalidDescent`` when the path continues below a leaf.
    """
    path = tuple(path)
    if not path:
        raise NotFound(path, 0)

    candidates: Sequence[Entity] = roots
    entity: Entity | None = None
    for depth, index in enumerate(path):
        if entity is not None:
            if isinstance(entity, Leaf):
                raise InvalidDescent(path, depth)
            if not isinstance(entity, Container):
                raise TypeError(f"unknown entity type: {type(entity).__name__}")
            candidates = entity.children
        if index < 0 or index >= len(candidates):
            raise NotFound(path, depth)
        entity = candidates[index]
    assert entity is not None
    return entity
