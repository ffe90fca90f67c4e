#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .config import RenderConfig
from .canvas import Canvas, Pen
from .errors import SurfaceError

logger = logging.getLogger(__name__)


class Renderer:
    """
    Blits a Canvas onto a curses screen.

    The renderer clips everything to the screen. Any other failed write, and
    a failed refresh, is raised as SurfaceError: the caller decides what to
    do about a broken terminal.
    """

    def __init__(self):
        self.pen_pair = 0
        self.bg_pair = 0

    def init_colors(self, config, pen_rgb=None, bg_rgb=None):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        from .color import init_colors
        self.pen_pair, self.bg_pair = init_colors(config, pen_rgb, bg_rgb)

    def pen(self, config: RenderConfig) -> Pen:
        """The pen matching the current config and color pairs."""
        return Pen(config.glyph, self.pen_pair if config.use_color else 0)

    def render(self, stdscr, canvas: Canvas, config: RenderConfig):
        """
        Erase the screen and draw every filled canvas cell.

        Does NOT call stdscr.refresh(); call present() after optional
        overlay drawing.
        """
        # Apply background color to entire screen; pair 0 resets a
        # background left over from a colored frame
        bg_pair = self.bg_pair if config.use_color else 0
        try:
            stdscr.bkgd(' ', curses.color_pair(bg_pair))
        except curses.error as e:
            raise SurfaceError(f"Could not set background: {e}") from e
        stdscr.erase()

        use_color = config.use_color
        count = 0
        for y, x, char, pen in canvas.cells():
            attr = curses.color_pair(0)
            if use_color:
                attr = curses.color_pair(getattr(pen, 'color', 0) or 0)
            self.write(stdscr, y, x, char, attr)
            count += 1
        logger.debug("Rendered %d cells", count)

    def write(self, stdscr, y, x, text, attr=0):
        """addstr clipped to the screen. Returns the number of chars written."""
        th, tw = stdscr.getmaxyx()
        if y < 0 or y >= th or x < 0 or x >= tw:
            return 0
        text = text[:tw - x]
        if not text:
            return 0
        try:
            stdscr.addstr(y, x, text, attr)
        except curses.error as e:
            # curses reports an error after writing the bottom-right cell
            if y == th - 1 and x + len(text) == tw:
                return len(text)
            raise SurfaceError(f"Write failed at row {y}, col {x}: {e}", y, x) from e
        return len(text)

    def write_centered(self, stdscr, y, text, attr=0):
        _th, tw = stdscr.getmaxyx()
        return self.write(stdscr, y, max(0, tw // 2 - len(text) // 2), text, attr)

    def present(self, stdscr):
        try:
            stdscr.refresh()
        except curses.error as e:
            raise SurfaceError(f"Screen refresh failed: {e}") from e
