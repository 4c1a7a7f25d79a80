"""Tests for viewport windowing over variable-height rows."""

from __future__ import annotations

import random
import unittest

from lazyh5.tree_model import ViewportWindow, compute_window, row_prefix_heights


def _window_height(heights: list[int], window: ViewportWindow) -> int:
    return sum(heights[window.start_row:window.end_row])


class PrefixHeightTests(unittest.TestCase):
    def test_prefix_heights(self) -> None:
        self.assertEqual(row_prefix_heights([1, 3, 2]), [0, 1, 4, 6])

    def test_non_positive_heights_count_as_one(self) -> None:
        self.assertEqual(row_prefix_heights([0, -2, 2]), [0, 1, 2, 4])


class ComputeWindowTests(unittest.TestCase):
    def test_empty_sequence_gives_empty_window(self) -> None:
        self.assertEqual(compute_window([], 0, 0, 10), ViewportWindow(0, 0))

    def test_window_anchored_at_previous_start_while_selection_fits(self) -> None:
        heights = [1] * 10
        self.assertEqual(compute_window(heights, 0, 0, 4), ViewportWindow(0, 4))
        self.assertEqual(compute_window(heights, 3, 0, 4), ViewportWindow(0, 4))
        self.assertEqual(compute_window(heights, 5, 3, 4), ViewportWindow(3, 7))

    def test_selection_past_bottom_scrolls_down_minimally(self) -> None:
        heights = [1] * 10
        self.assertEqual(compute_window(heights, 4, 0, 4), ViewportWindow(1, 5))
        self.assertEqual(compute_window(heights, 9, 0, 4), ViewportWindow(6, 10))

    def test_selection_above_top_scrolls_up_to_selection(self) -> None:
        heights = [1] * 10
        self.assertEqual(compute_window(heights, 2, 5, 4), ViewportWindow(2, 6))

    def test_partial_page_at_end_is_allowed(self) -> None:
        heights = [1] * 5
        self.assertEqual(compute_window(heights, 4, 3, 4), ViewportWindow(3, 5))

    def test_grow_after_resize_keeps_start(self) -> None:
        heights = [1] * 10
        self.assertEqual(compute_window(heights, 4, 2, 8), ViewportWindow(2, 10))

    def test_shrink_after_resize_scrolls_to_keep_selection(self) -> None:
        heights = [1] * 10
        self.assertEqual(compute_window(heights, 6, 2, 3), ViewportWindow(4, 7))

    def test_variable_heights_never_include_a_truncated_row(self) -> None:
        heights = [2, 3, 1, 2]
        window = compute_window(heights, 0, 0, 4)
        self.assertEqual(window, ViewportWindow(0, 1))
        window = compute_window(heights, 2, 0, 4)
        self.assertEqual(window, ViewportWindow(1, 3))

    def test_scrolling_down_reaches_back_as_far_as_height_allows(self) -> None:
        heights = [1, 1, 1, 3, 1]
        self.assertEqual(compute_window(heights, 4, 0, 4), ViewportWindow(3, 5))
        self.assertEqual(compute_window(heights, 3, 0, 4), ViewportWindow(2, 4))

    def test_scrolling_down_fills_rows_below_selection_that_still_fit(self) -> None:
        heights = [3, 1, 1, 1]
        window = compute_window(heights, 2, 0, 4)
        self.assertEqual(window, ViewportWindow(1, 4))
        self.assertEqual(_window_height(heights, window), 3)

    def test_oversized_row_is_shown_alone(self) -> None:
        heights = [1, 5, 1]
        self.assertEqual(compute_window(heights, 1, 0, 3), ViewportWindow(1, 2))
        self.assertEqual(compute_window(heights, 1, 1, 3), ViewportWindow(1, 2))

    def test_out_of_range_inputs_are_clamped(self) -> None:
        heights = [1] * 3
        self.assertEqual(compute_window(heights, 10, 50, 0), ViewportWindow(2, 3))
        self.assertEqual(compute_window(heights, -4, -1, 2), ViewportWindow(0, 2))

    def test_window_invariants_hold_for_random_inputs(self) -> None:
        rng = random.Random(1234)
        for _ in range(500):
            heights = [rng.randint(1, 4) for _ in range(rng.randint(1, 30))]
            selection = rng.randrange(len(heights))
            previous_start = rng.randrange(len(heights))
            display_height = rng.randint(1, 12)
            window = compute_window(heights, selection, previous_start, display_height)
            with self.subTest(heights=heights, sel=selection, prev=previous_start, h=display_height):
                self.assertTrue(window.start_row <= selection < window.end_row)
                self.assertLessEqual(window.end_row, len(heights))
                if window.end_row - window.start_row > 1:
                    self.assertLessEqual(_window_height(heights, window), display_height)
                else:
                    only = heights[window.start_row]
                    next_fits = (
                        window.end_row < len(heights)
                        and only + heights[window.end_row] <= display_height
                    )
                    self.assertFalse(next_fits)

    def test_moving_within_window_never_scrolls(self) -> None:
        rng = random.Random(99)
        for _ in range(200):
            heights = [rng.randint(1, 3) for _ in range(rng.randint(2, 25))]
            display_height = rng.randint(3, 10)
            first = compute_window(heights, rng.randrange(len(heights)), rng.randrange(len(heights)), display_height)
            for selection in first.as_range():
                with self.subTest(heights=heights, window=first, sel=selection):
                    again = compute_window(heights, selection, first.start_row, display_height)
                    self.assertEqual(again.start_row, first.start_row)


if __name__ == "__main__":
    unittest.main()
