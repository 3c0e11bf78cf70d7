"""Tests for menu bar layout and frame placement."""

from __future__ import annotations

import unittest

from tmenu.render import RenderContext, build_horizontal_row, build_menu_rows, render_frame, render_menu
from tmenu.render.text import char_display_width, clip_text, display_width, sanitize
from tmenu.session import WindowSnapshot
from tmenu.ui_theme import PLAIN_THEME, UITheme

BARE = UITheme(name="bare", reset="", normal="", selected="", prompt="", query="")
MARKED = UITheme(name="marked", reset="]", normal="", selected="[", prompt="", query="")


def context(items=("one", "two"), selected=0, query="", **kwargs) -> RenderContext:
    values = {"width": 40, "height": 10, "theme": BARE, "search_margin": 0.0, "padding": 2}
    values.update(kwargs)
    return RenderContext(snapshot=WindowSnapshot(tuple(items), selected, query), **values)


class TextHelperTests(unittest.TestCase):
    def test_widths(self) -> None:
        self.assertEqual(char_display_width("a"), 1)
        self.assertEqual(char_display_width("日"), 2)
        self.assertEqual(char_display_width("\u0301"), 0)
        self.assertEqual(display_width("a日b"), 4)

    def test_clip_drops_straddling_wide_char(self) -> None:
        self.assertEqual(clip_text("ab日", 3), "ab")
        self.assertEqual(clip_text("abc", 0), "")
        self.assertEqual(clip_text("abc", 10), "abc")

    def test_sanitize_replaces_control_characters(self) -> None:
        self.assertEqual(sanitize("a\tb\x1b[31m"), "a b [31m")
        self.assertEqual(sanitize("plain"), "plain")


class HorizontalRowTests(unittest.TestCase):
    def test_row_layout_without_prompt(self) -> None:
        row = build_horizontal_row(context(query="o"))
        self.assertEqual(row, " o_  one  two".ljust(40))

    def test_prompt_is_padded(self) -> None:
        row = build_horizontal_row(context(prompt="run", items=("a",)))
        self.assertTrue(row.startswith(" run  _  a"))
        self.assertEqual(len(row), 40)

    def test_items_start_after_search_margin(self) -> None:
        row = build_horizontal_row(context(search_margin=0.5, items=("x",)))
        self.assertEqual(row.index("x"), 22)

    def test_items_that_do_not_fit_are_cut(self) -> None:
        row = build_horizontal_row(context(width=12, items=("alpha", "beta")))
        self.assertEqual(row, " _  alpha  b")
        self.assertEqual(display_width(row), 12)

    def test_selected_item_uses_selected_style(self) -> None:
        row = build_horizontal_row(context(theme=MARKED, selected=1))
        self.assertIn("[two]", row)
        self.assertNotIn("[one]", row)

    def test_no_selection_when_window_empty(self) -> None:
        row = build_horizontal_row(context(theme=MARKED, items=(), selected=None))
        self.assertNotIn("[", row)


class VerticalRowsTests(unittest.TestCase):
    def test_one_row_per_item(self) -> None:
        rows = build_menu_rows(context(orientation="vertical", width=10))
        self.assertEqual(rows, [" _".ljust(10), "  one".ljust(10), "  two".ljust(10)])

    def test_rows_clip_to_height(self) -> None:
        rows = build_menu_rows(context(orientation="vertical", height=2, items=("a", "b", "c")))
        self.assertEqual(len(rows), 2)

    def test_selected_row_is_filled(self) -> None:
        rows = build_menu_rows(context(orientation="vertical", width=8, theme=MARKED, selected=0))
        self.assertEqual(rows[1], "[  one][   ]")


class FrameTests(unittest.TestCase):
    def test_top_position_starts_at_first_row(self) -> None:
        frame = render_frame(context())
        self.assertTrue(frame.startswith("\033[H\033[2J\033[1;1H"))

    def test_bottom_position_places_block_at_last_rows(self) -> None:
        frame = render_frame(context(position="bottom", orientation="vertical", height=10))
        self.assertIn("\033[8;1H", frame)
        self.assertIn("\033[10;1H", frame)
        self.assertNotIn("\033[11;1H", frame)

    def test_render_menu_writes_one_frame(self) -> None:
        written: list[str] = []
        render_menu(context(theme=PLAIN_THEME), written.append)
        self.assertEqual(len(written), 1)
        self.assertIn("\033[7m", written[0])


if __name__ == "__main__":
    unittest.main()
