"""Viewport windowing over variable-height rows.

The window is the contiguous slice of rows drawn in the tree pane. It stays
anchored at its previous start and only scrolls when the selection would leave
it, so moving the cursor inside the visible area never shifts the view.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ViewportWindow:
    """Half-open ``[start_row, end_row)`` slice of the visible rows."""

    start_row: int = 0
    end_row: int = 0

    def __len__(self) -> int:
        return max(0, self.end_row - self.start_row)

    def contains(self, row: int) -> bool:
        return self.start_row <= row < self.end_row

    def as_range(self) -> range:
        return range(self.start_row, self.end_row)


def row_prefix_heights(heights: Sequence[int]) -> list[int]:
    """Return ``H`` where ``H[i]`` is the total height of rows ``[0, i)``.

    Heights below one are counted as one so every row occupies a line.
    """
    prefix = [0]
    total = 0
    for height in heights:
        total += max(1, int(height))
        prefix.append(total)
    return prefix


def _fit_end(prefix: list[int], start: int, display_height: int) -> int:
    """Largest end such that rows ``[start, end)`` fit, never below ``start + 1``."""
    row_count = len(prefix) - 1
    end = bisect_right(prefix, prefix[start] + display_height) - 1
    return max(start + 1, min(end, row_count))


def _fit_start(prefix: list[int], end: int, display_height: int) -> int:
    """Smallest start such that rows ``[start, end)`` fit, never above ``end - 1``."""
    start = bisect_left(prefix, prefix[end] - display_height)
    return max(0, min(start, end - 1))


def compute_window(
    heights: Sequence[int],
    selection_row: int,
    previous_start: int,
    display_height: int,
) -> ViewportWindow:
    """Return the window that shows ``selection_row`` with the least scrolling.

    ``heights`` holds each visible row's rendered height, in the same units as
    ``display_height``. Three cases:

    - selection above ``previous_start``: the window starts at the selection;
    - selection past what fits below ``previous_start``: the window ends just
      after the selection and reaches back as far as the height allows;
    - otherwise the start is kept and only the end is recomputed, which
      absorbs resizes and content changes.

    A window never includes a row that would be cut off, except when the
    selected row alone is taller than the display; then it holds just that row
    and the renderer clips it.
    """
    row_count = len(heights)
    if row_count == 0:
        return ViewportWindow(0, 0)

    display_height = max(1, int(display_height))
    selection_row = max(0, min(selection_row, row_count - 1))
    previous_start = max(0, min(previous_start, row_count - 1))
    prefix = row_prefix_heights(heights)

    if selection_row < previous_start:
        start = selection_row
        end = _fit_end(prefix, start, display_height)
    elif prefix[selection_row + 1] - prefix[previous_start] > display_height:
        start = _fit_start(prefix, selection_row + 1, display_height)
        end = max(selection_row + 1, _fit_end(prefix, start, display_height))
    else:
        start = previous_start
        end = _fit_end(prefix, start, display_height)
    return ViewportWindow(start, end)
