#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

from .config import RenderConfig
from .canvas import Canvas, Pen
from .renderer import Renderer
from .sierpinski import RenderStats, draw_sierpinski, layout_triangles
from .color import parse_hex_color

logger = logging.getLogger(__name__)

_ENTER_KEYS = (ord('\n'), ord('\r'), curses.KEY_ENTER)


def paint(canvas: Canvas, config: RenderConfig, pen) -> RenderStats:
    """Lay out one triangle per configured depth and draw them all."""
    triangles = layout_triangles(canvas.w, canvas.h, len(config.depths), config.aspect)
    stats = RenderStats()
    for triangle, depth in zip(triangles, config.depths):
        stats += draw_sierpinski(canvas, triangle, depth, pen)
    return stats


def render_text(config: RenderConfig, cols: int, rows: int):
    """Render without curses. Returns the screen as a list of text lines."""
    if config.use_braille:
        canvas = Canvas(cols * 2, rows * 4, braille=True)
    else:
        canvas = Canvas(cols, rows)
    stats = paint(canvas, config, Pen(config.glyph))
    logger.info("Rendered depths %s: %d segments, %d points",
                config.depths, stats.segments, stats.points)
    return canvas.rows()


def config_from_args(args) -> RenderConfig:
    """RenderConfig from terminal detection plus CLI overrides."""
    config = RenderConfig.detect_terminal()
    if args.no_color or args.mono:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    if args.glyph:
        config.glyph = args.glyph
    if args.depth:
        config.depths = tuple(args.depth)
    config.validate()
    return config


class DemoApp:
    """
    Interactive harness: draws the configured triangles once, overlays the
    title and hint, then blocks on a key. Keys that change the picture cause
    exactly one redraw.
    """

    def __init__(self, stdscr, args):
        self.stdscr = stdscr
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)

        self.config = config_from_args(args)

        # ── Renderer + curses color init ────────────────────────────────
        renderer = Renderer()
        renderer.init_colors(self.config,
                             parse_hex_color(args.color),
                             parse_hex_color(args.bg_color))
        self.renderer = renderer
        self.stats = RenderStats()

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self, key):
        config = self.config

        if key in _ENTER_KEYS or key == ord('q'):
            self.running = False
        elif key in (ord('='), ord('+')):
            config.shift_depths(1)
        elif key == ord('-'):
            config.shift_depths(-1)
        elif key == ord('b'):
            config.use_braille = not config.use_braille
        elif key == ord('c'):
            config.use_color = not config.use_color
        # Anything else, including KEY_RESIZE, just redraws

    # ────────────────────────────────────────────────────────────────────
    # Drawing
    # ────────────────────────────────────────────────────────────────────
    def draw(self):
        th, tw = self.stdscr.getmaxyx()
        config = self.config
        renderer = self.renderer

        canvas = Canvas.for_terminal(tw, th, braille=config.use_braille)
        self.stats = paint(canvas, config, renderer.pen(config))
        renderer.render(self.stdscr, canvas, config)

        bold = curses.A_BOLD
        renderer.write_centered(self.stdscr, 1, config.title, bold)
        renderer.write_centered(self.stdscr, 4, config.hint)

        # ── Status line (last row) ──────────────────────────────────────
        modestr = (f"{'COL' if config.use_color else 'MON'} "
                   f"{'BRA' if config.use_braille else 'GLY'}")
        depthstr = ','.join(str(d) for d in config.depths)
        status = (f" DEPTH:{depthstr}"
                  f" | SEG:{self.stats.segments}"
                  f" | PTS:{self.stats.points}"
                  f" | [{modestr}] ")
        renderer.write(self.stdscr, th - 1, 0, status.center(tw - 1, '='), bold)

        renderer.present(self.stdscr)

    def run(self):
        while self.running:
            self.draw()
            self.handle_input(self.stdscr.getch())


def main(stdscr, args):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args)
    app.run()
