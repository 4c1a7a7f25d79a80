"""Regex search over row labels.

Search highlights rows; it never hides them. A pattern that fails to compile
is rejected and the previously active search stays in place.
"""

from __future__ import annotations

import logging
import re

from .errors import PatternError

logger = logging.getLogger(__name__)


class SearchMatcher:
    """Compiled search pattern usable as a label predicate.

    The empty pattern matches nothing, so entering search mode starts with no
    highlighted rows.
    """

    def __init__(self, pattern: str, ignore_case: bool = False) -> None:
        self.pattern = pattern
        self.ignore_case = ignore_case
        flags = re.IGNORECASE if ignore_case else 0
        try:
            self._regex = re.compile(pattern, flags) if pattern else None
        except re.error as exc:
            raise PatternError(pattern, str(exc)) from exc

    def matches(self, text: str) -> bool:
        if self._regex is None:
            return False
        return self._regex.search(text) is not None

    __call__ = matches

    def span(self, text: str) -> tuple[int, int] | None:
        """Return the first match span in ``text`` for inline highlighting."""
        if self._regex is None:
            return None
        match = self._regex.search(text)
        if match is None or match.start() == match.end():
            return None
        return match.span()


def compile_pattern(pattern: str, ignore_case: bool = False) -> SearchMatcher:
    """Compile ``pattern`` or raise ``PatternError``."""
    return SearchMatcher(pattern, ignore_case=ignore_case)


class SearchFilter:
    """Holds the active search, if any."""

    def __init__(self, ignore_case: bool = False) -> None:
        self.ignore_case = ignore_case
        self.matcher: SearchMatcher | None = None

    @property
    def active(self) -> bool:
        return self.matcher is not None

    @property
    def pattern(self) -> str | None:
        return self.matcher.pattern if self.matcher is not None else None

    def set_search(self, pattern: str | None) -> None:
        """Replace the active search; ``None`` clears it.

        Raises ``PatternError`` without touching the current search when
        ``pattern`` does not compile.
        """
        if pattern is None:
            self.matcher = None
            return
        try:
            matcher = compile_pattern(pattern, ignore_case=self.ignore_case)
        except PatternError:
            logger.debug("rejected search pattern %r, keeping %r", pattern, self.pattern)
            raise
        self.matcher = matcher
