"""Tests for the session frame cycle: tree pane, detail pane, and status."""

from __future__ import annotations

import unittest

from lazyh5.ansi import display_width, strip_ansi
from lazyh5.config import ViewerConfig
from lazyh5.entity import Container, Leaf, SourceFile
from lazyh5.errors import NotFound
from lazyh5.session import Session
from lazyh5.tree_model import ViewportWindow

SOURCE = SourceFile(
    "scan.nxs",
    3 * 1024 * 1024,
    (Container("A", (Leaf("B", size=64, shape=(8,), dtype="float64"), Container("C", (Leaf("D"),)))),),
)


def _session(**overrides: object) -> Session:
    settings = {"no_color": True, "left_pane_percent": 50.0}
    settings.update(overrides)
    return Session(SOURCE, ViewerConfig(**settings))  # type: ignore[arg-type]


class SessionFrameTests(unittest.TestCase):
    def test_frame_windows_tree_to_pane_height(self) -> None:
        session = _session()
        # 2 pane rows after header and status lines.
        frame = session.frame(40, 4)
        self.assertEqual(frame.window, ViewportWindow(0, 2))
        self.assertEqual([row.path for row in frame.tree_rows], [(0,), (0, 0)])
        self.assertEqual(len(frame.tree_lines), 2)
        self.assertEqual(frame.selected.name, "A")

    def test_page_down_scenario_through_keys(self) -> None:
        session = _session()
        session.frame(40, 4)
        for key in ("j", "j"):
            session.handle_key(key)
            session.frame(40, 4)
        self.assertEqual(session.frame(40, 4).selected.name, "C")
        session.handle_key("PAGE_DOWN")
        frame = session.frame(40, 4)
        self.assertEqual(frame.selected.name, "D")
        self.assertEqual(frame.window, ViewportWindow(2, 4))
        self.assertEqual([strip_ansi(line).strip() for line in frame.tree_lines], ["▾ C", "D"])

    def test_detail_pane_describes_selection(self) -> None:
        session = _session()
        session.handle_key("j")
        frame = session.frame(80, 20)
        details = [line.rstrip() for line in frame.detail_lines]
        self.assertEqual(details[0], "B")
        self.assertEqual(details[1], "/A/B")
        self.assertIn("Shape      (8)", details)
        self.assertIn("Size       64 B", details)

    def test_screen_lines_are_full_width(self) -> None:
        session = _session()
        frame = session.frame(60, 10)
        lines = frame.screen_lines()
        self.assertEqual(len(lines), 10)
        self.assertTrue(strip_ansi(lines[0]).startswith("scan.nxs"))
        self.assertTrue(strip_ansi(lines[0]).endswith("3.00 MiB"))
        for line in lines[1:-1]:
            self.assertEqual(strip_ansi(line)[frame.left_width], "│")
        self.assertEqual(display_width(lines[-1]), 60)

    def test_screen_lines_never_exceed_requested_height(self) -> None:
        session = _session()
        for height in (0, 1, 2, 3):
            with self.subTest(height=height):
                frame = session.frame(40, height)
                self.assertEqual(len(frame.screen_lines()), height)
                self.assertEqual(len(frame.tree_lines), 1)
        lines = session.frame(40, 2).screen_lines()
        self.assertTrue(strip_ansi(lines[0]).startswith("scan.nxs"))
        self.assertIn("│", strip_ansi(lines[1]))

    def test_status_line_follows_search_mode(self) -> None:
        session = _session()
        self.assertIn("/ search", strip_ansi(session.frame(60, 10).status))
        session.handle_key("/")
        session.handle_key("B")
        self.assertTrue(strip_ansi(session.frame(60, 10).status).startswith("/B"))
        session.handle_key("ENTER")
        self.assertIn("1 match ", strip_ansi(session.frame(60, 10).status))

    def test_search_rows_drop_selection_style(self) -> None:
        session = _session()
        session.handle_key("/")
        session.handle_key("B")
        frame = session.frame(60, 10)
        styles = {row.path: row.style.value for row in frame.tree_rows}
        self.assertEqual(styles[(0,)], "normal")
        self.assertEqual(styles[(0, 0)], "search_match")

    def test_empty_file_renders_without_selection(self) -> None:
        session = Session(SourceFile("empty.h5", 800), ViewerConfig(no_color=True))
        frame = session.frame(40, 6)
        self.assertIsNone(frame.selected)
        self.assertEqual(frame.window, ViewportWindow(0, 0))
        self.assertEqual(frame.detail_lines, ())
        self.assertTrue(session.handle_key("j"))
        self.assertEqual(session.navigator.state.selection_row, 0)

    def test_desynchronized_tree_is_fatal(self) -> None:
        session = _session()
        session.source = SourceFile("scan.nxs", 0, ())
        with self.assertLogs("lazyh5.session", level="ERROR"):
            with self.assertRaises(NotFound):
                session.frame(40, 6)

    def test_quit_requested(self) -> None:
        session = _session()
        self.assertFalse(session.quit_requested)
        session.handle_key("q")
        self.assertTrue(session.quit_requested)


if __name__ == "__main__":
    unittest.main()
