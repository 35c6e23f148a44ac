"""
Terminal Screen

Owns the curses session: setup and restoration of the terminal,
the timed input poll and blitting of rendered sky frames.
Every curses failure leaves this module as a TerminalError.
"""

from __future__ import annotations
import curses
import locale
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.types import CellDraw, RGB, SkyFrame, Viewport
from .colors import ColorTable

logger = logging.getLogger(__name__)


POLL_TIMEOUT_MS = 50
ESC_DELAY_MS = 25
KEY_ESCAPE = 27
QUIT_KEYS = (ord("q"), KEY_ESCAPE)


class TerminalError(RuntimeError):
    """Terminal setup, input or drawing failed."""


class EventKind(Enum):
    QUIT = "quit"
    RESIZE = "resize"


@dataclass(slots=True, frozen=True)
class InputEvent:
    kind: EventKind
    width: int = 0
    height: int = 0


class TerminalScreen:
    """
    curses-backed full-screen canvas

    Usage:
        with TerminalScreen() as screen:
            event = screen.poll_event()
            screen.draw(frame)
    """

    def __init__(self, poll_timeout_ms: int = POLL_TIMEOUT_MS):
        self.poll_timeout_ms = poll_timeout_ms
        self.stdscr = None
        self.colors: Optional[ColorTable] = None

    def __enter__(self) -> "TerminalScreen":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def open(self) -> None:
        """Enter full-screen mode: no echo, cbreak, hidden cursor, colours."""
        # glyphs like ✦ and ☄ need the user's UTF-8 locale
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error as e:
            logger.warning("Locale unavailable: %s", e)
        try:
            self.stdscr = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            curses.set_escdelay(ESC_DELAY_MS)
            self._hide_cursor()
            if curses.has_colors():
                curses.start_color()
                self.colors = ColorTable()
            self.stdscr.timeout(self.poll_timeout_ms)
        except curses.error as e:
            self.close()
            raise TerminalError(f"terminal setup failed: {e}") from e

    def close(self) -> None:
        """Restore the terminal. Best effort: failed steps are logged and skipped."""
        if self.stdscr is None:
            return
        stdscr = self.stdscr
        steps = (
            lambda: stdscr.keypad(False),
            curses.nocbreak,
            curses.echo,
            lambda: curses.curs_set(1),
            curses.endwin,
        )
        for step in steps:
            try:
                step()
            except curses.error as e:
                logger.warning("Terminal restore step failed: %s", e)
        self.stdscr = None
        self.colors = None

    def _hide_cursor(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

    # ── Input ────────────────────────────────────────────────────────────────

    def viewport(self) -> Viewport:
        rows, cols = self.stdscr.getmaxyx()
        return Viewport(0, 0, cols, rows)

    def poll_event(self) -> Optional[InputEvent]:
        """
        Wait up to the poll timeout for a key or resize.

        Returns:
            QUIT for q / Esc, RESIZE with the new size, None otherwise
        """
        try:
            key = self.stdscr.getch()
        except curses.error as e:
            raise TerminalError(f"input poll failed: {e}") from e

        if key == curses.KEY_RESIZE:
            curses.update_lines_cols()
            area = self.viewport()
            return InputEvent(EventKind.RESIZE, area.width, area.height)
        if key in QUIT_KEYS:
            return InputEvent(EventKind.QUIT)
        return None

    # ── Output ───────────────────────────────────────────────────────────────

    def _attr(self, fg: RGB, bg: RGB) -> int:
        if self.colors is None:
            return curses.A_NORMAL
        return self.colors.attr(fg, bg)

    def _put(self, cell: CellDraw, rows: int, cols: int) -> None:
        if not (0 <= cell.x < cols and 0 <= cell.y < rows):
            return
        try:
            self.stdscr.addstr(cell.y, cell.x, cell.glyph, self._attr(cell.fg, cell.bg))
        except curses.error:
            # addstr on the bottom-right cell writes the glyph, then fails
            # moving the cursor past the end of the screen
            if (cell.y, cell.x) != (rows - 1, cols - 1):
                raise

    def draw(self, frame: SkyFrame) -> None:
        """Replace the screen contents with a rendered frame."""
        try:
            rows, cols = self.stdscr.getmaxyx()
            self.stdscr.erase()
            self.stdscr.bkgd(" ", self._attr(frame.background, frame.background))
            for cell in frame.cells:
                self._put(cell, rows, cols)
            self.stdscr.refresh()
        except curses.error as e:
            raise TerminalError(f"drawing failed: {e}") from e
