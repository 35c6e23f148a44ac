"""
Terminal colour mapping — RGB palette → curses colours and pairs.

Three modes, picked once from the terminal's capabilities:
    CUSTOM   — terminal can redefine ≥256 colours: exact RGB via init_color
    XTERM256 — fixed xterm-256 palette: nearest cube / grey-ramp index
    BASIC    — 8 ANSI colours: nearest by squared distance

Pairs are allocated on first use per (fg, bg) and cached.
"""

from __future__ import annotations
import curses
import logging
from enum import Enum

from core.types import RGB

logger = logging.getLogger(__name__)


# xterm 6×6×6 cube channel levels
CUBE_LEVELS = (0, 95, 135, 175, 215, 255)
# First colour slot we are allowed to redefine (0-15 are the user's theme)
FIRST_CUSTOM_SLOT = 16

BASIC_COLORS: dict[int, RGB] = {
    curses.COLOR_BLACK:   RGB(0, 0, 0),
    curses.COLOR_RED:     RGB(205, 0, 0),
    curses.COLOR_GREEN:   RGB(0, 205, 0),
    curses.COLOR_YELLOW:  RGB(205, 205, 0),
    curses.COLOR_BLUE:    RGB(0, 0, 238),
    curses.COLOR_MAGENTA: RGB(205, 0, 205),
    curses.COLOR_CYAN:    RGB(0, 205, 205),
    curses.COLOR_WHITE:   RGB(229, 229, 229),
}


class ColorMode(Enum):
    CUSTOM = "custom"
    XTERM256 = "xterm256"
    BASIC = "basic"


def _distance_sq(a: RGB, b: RGB) -> int:
    return (a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2


def _nearest_level(value: int) -> int:
    return min(range(len(CUBE_LEVELS)), key=lambda i: abs(CUBE_LEVELS[i] - value))


def rgb_to_xterm256(color: RGB) -> int:
    """Nearest xterm-256 index, choosing between the colour cube and the grey ramp."""
    ri, gi, bi = (_nearest_level(c) for c in color)
    cube_index = 16 + 36 * ri + 6 * gi + bi
    cube_rgb = RGB(CUBE_LEVELS[ri], CUBE_LEVELS[gi], CUBE_LEVELS[bi])

    # grey ramp 232..255 = 8, 18, ..., 238
    avg = sum(color) // 3
    grey_step = max(0, min(23, round((avg - 8) / 10)))
    grey_level = 8 + grey_step * 10
    grey_rgb = RGB(grey_level, grey_level, grey_level)

    if _distance_sq(color, grey_rgb) < _distance_sq(color, cube_rgb):
        return 232 + grey_step
    return cube_index


def rgb_to_basic(color: RGB) -> int:
    return min(BASIC_COLORS, key=lambda idx: _distance_sq(color, BASIC_COLORS[idx]))


def rgb_to_curses_scale(color: RGB) -> tuple[int, int, int]:
    """0-255 channels → curses 0-1000 channels."""
    return tuple(round(c * 1000 / 255) for c in color)


def detect_mode(colors: int, can_change: bool) -> ColorMode:
    if colors >= 256 and can_change:
        return ColorMode.CUSTOM
    if colors >= 256:
        return ColorMode.XTERM256
    return ColorMode.BASIC


class ColorTable:
    """
    Lazily allocated curses colours and pairs.

    Call only after curses.start_color(). The mode and the table sizes
    are read from curses unless given explicitly.
    """

    def __init__(self, mode: ColorMode | None = None,
                 max_colors: int | None = None,
                 max_pairs: int | None = None):
        self.max_colors = curses.COLORS if max_colors is None else max_colors
        self.max_pairs = curses.COLOR_PAIRS if max_pairs is None else max_pairs
        if mode is None:
            mode = detect_mode(self.max_colors, curses.can_change_color())
        self.mode = mode

        self._colors: dict[RGB, int] = {}
        self._pairs: dict[tuple[int, int], int] = {}
        self._next_slot = FIRST_CUSTOM_SLOT

        logger.debug("Colour mode %s (%d colours, %d pairs)",
                     self.mode.value, self.max_colors, self.max_pairs)

    def color(self, rgb: RGB) -> int:
        """curses colour number for an RGB value."""
        if rgb in self._colors:
            return self._colors[rgb]

        if self.mode is ColorMode.CUSTOM and self._next_slot < self.max_colors:
            number = self._next_slot
            curses.init_color(number, *rgb_to_curses_scale(rgb))
            self._next_slot += 1
        elif self.mode is ColorMode.BASIC:
            number = rgb_to_basic(rgb)
        else:
            # custom slots exhausted fall back to the fixed palette
            number = rgb_to_xterm256(rgb)

        self._colors[rgb] = number
        return number

    def pair(self, fg: RGB, bg: RGB) -> int:
        """curses pair number for a foreground/background combination."""
        key = (self.color(fg), self.color(bg))
        if key in self._pairs:
            return self._pairs[key]

        number = len(self._pairs) + 1
        if number >= self.max_pairs:
            # pair table full: reuse the last allocated pair
            return max(0, self.max_pairs - 1)
        curses.init_pair(number, *key)
        self._pairs[key] = number
        return number

    def attr(self, fg: RGB, bg: RGB) -> int:
        return curses.color_pair(self.pair(fg, bg))
