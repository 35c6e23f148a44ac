import curses
import unittest
from unittest.mock import patch

from core.types import RGB
from terminal.colors import (
    ColorMode,
    ColorTable,
    detect_mode,
    rgb_to_basic,
    rgb_to_curses_scale,
    rgb_to_xterm256,
)


class TestColorConversion(unittest.TestCase):

    def test_xterm256_cube_corners(self):
        self.assertEqual(rgb_to_xterm256(RGB(0, 0, 0)), 16)
        self.assertEqual(rgb_to_xterm256(RGB(255, 255, 255)), 231)
        self.assertEqual(rgb_to_xterm256(RGB(255, 0, 0)), 196)
        self.assertEqual(rgb_to_xterm256(RGB(0, 0, 255)), 21)

    def test_xterm256_prefers_grey_ramp_for_near_greys(self):
        # sky background is closer to grey 233 than to cube black
        self.assertEqual(rgb_to_xterm256(RGB(10, 10, 30)), 233)
        self.assertEqual(rgb_to_xterm256(RGB(128, 128, 128)), 244)

    def test_basic_nearest(self):
        self.assertEqual(rgb_to_basic(RGB(250, 10, 10)), curses.COLOR_RED)
        self.assertEqual(rgb_to_basic(RGB(10, 10, 30)), curses.COLOR_BLACK)
        self.assertEqual(rgb_to_basic(RGB(255, 200, 100)), curses.COLOR_YELLOW)
        self.assertEqual(rgb_to_basic(RGB(230, 230, 250)), curses.COLOR_WHITE)

    def test_curses_scale(self):
        self.assertEqual(rgb_to_curses_scale(RGB(255, 0, 51)), (1000, 0, 200))

    def test_detect_mode(self):
        self.assertIs(detect_mode(256, True), ColorMode.CUSTOM)
        self.assertIs(detect_mode(256, False), ColorMode.XTERM256)
        self.assertIs(detect_mode(8, True), ColorMode.BASIC)


@patch('terminal.colors.curses.init_pair')
@patch('terminal.colors.curses.init_color')
class TestColorTable(unittest.TestCase):

    def test_custom_colours_allocated_once(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.CUSTOM, max_colors=256, max_pairs=64)
        white = table.color(RGB(255, 255, 255))
        again = table.color(RGB(255, 255, 255))
        sky = table.color(RGB(10, 10, 30))

        self.assertEqual((white, again, sky), (16, 16, 17))
        mock_init_color.assert_any_call(16, 1000, 1000, 1000)
        self.assertEqual(mock_init_color.call_count, 2)

    def test_custom_slots_exhausted_fall_back_to_palette(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.CUSTOM, max_colors=17, max_pairs=64)
        self.assertEqual(table.color(RGB(1, 2, 3)), 16)
        self.assertEqual(table.color(RGB(255, 0, 0)), 196)
        self.assertEqual(mock_init_color.call_count, 1)

    def test_xterm_mode_never_redefines(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.XTERM256, max_colors=256, max_pairs=64)
        self.assertEqual(table.color(RGB(255, 0, 0)), 196)
        mock_init_color.assert_not_called()

    def test_pairs_allocated_and_cached(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.BASIC, max_colors=8, max_pairs=64)
        first = table.pair(RGB(250, 10, 10), RGB(0, 0, 0))
        again = table.pair(RGB(250, 10, 10), RGB(0, 0, 0))
        second = table.pair(RGB(255, 255, 255), RGB(0, 0, 0))

        self.assertEqual((first, again, second), (1, 1, 2))
        mock_init_pair.assert_any_call(1, curses.COLOR_RED, curses.COLOR_BLACK)
        self.assertEqual(mock_init_pair.call_count, 2)

    def test_full_pair_table_reuses_last_pair(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.XTERM256, max_colors=256, max_pairs=3)
        self.assertEqual(table.pair(RGB(255, 0, 0), RGB(0, 0, 0)), 1)
        self.assertEqual(table.pair(RGB(0, 0, 255), RGB(0, 0, 0)), 2)
        self.assertEqual(table.pair(RGB(255, 255, 255), RGB(0, 0, 0)), 2)
        self.assertEqual(mock_init_pair.call_count, 2)

    def test_attr_uses_color_pair(self, mock_init_color, mock_init_pair):
        table = ColorTable(ColorMode.BASIC, max_colors=8, max_pairs=64)
        with patch('terminal.colors.curses.color_pair', return_value=256) as mock_color_pair:
            self.assertEqual(table.attr(RGB(0, 0, 0), RGB(0, 0, 0)), 256)
        mock_color_pair.assert_called_once_with(1)


if __name__ == '__main__':
    unittest.main()
