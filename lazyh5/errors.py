"""Exception hierarchy.

Search-pattern errors are recoverable and rejected in place. Resolution errors
mean the displayed rows and the source hierarchy disagree; callers treat them
as fatal for the session.
"""

from __future__ import annotations


class LazyH5Error(Exception):
    """Base class for all errors raised by the engine."""


class PatternError(LazyH5Error, ValueError):
    """A search pattern failed to compile."""

    def __init__(self, pattern: str, message: str) -> None:
        super().__init__(f"invalid search pattern {pattern!r}: {message}")
        self.pattern = pattern
        self.message = message


class ResolutionError(LazyH5Error, LookupError):
    """A node path could not be mapped back onto the source hierarchy."""

    reason = "cannot resolve"

    def __init__(self, path: tuple[int, ...], depth: int) -> None:
        super().__init__(f"{self.reason} path {list(path)} at depth {depth}")
        self.path = tuple(path)
        self.depth = depth


class NotFound(ResolutionError):
    """A path index is out of range for the entity it selects from."""

    reason = "no entity for"


class InvalidDescent(ResolutionError):
    """A path tries to descend below a leaf entity."""

    reason = "cannot descend into leaf for"
