"""Terminal tree-view engine for exploring HDF5 and NeXus file hierarchies.

The package turns a loaded file hierarchy into navigable, searchable rows and
the viewport slice a renderer should paint. Reading files and driving the
terminal belong to the caller.
"""

from __future__ import annotations

from .entity import Container, Entity, Leaf, SourceFile
from .errors import InvalidDescent, LazyH5Error, NotFound, PatternError, ResolutionError
from .navigation import InputMode, NavigationState, TreeNavigator
from .resolver import resolve
from .session import Frame, Session

__all__ = [
    "Container",
    "Entity",
    "Leaf",
    "SourceFile",
    "LazyH5Error",
    "PatternError",
    "ResolutionError",
    "NotFound",
    "InvalidDescent",
    "InputMode",
    "NavigationState",
    "TreeNavigator",
    "resolve",
    "Frame",
    "Session",
]
