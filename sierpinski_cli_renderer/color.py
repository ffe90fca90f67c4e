#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

logger = logging.getLogger(__name__)

# Pair ids handed out by init_colors
PEN_PAIR = 1
BG_PAIR = 2

# First color slot we redefine, keeps ANSI 0-15 intact
_PEN_SLOT = 16
_BG_SLOT = 17

DEFAULT_PEN_RGB = (0, 255, 0)
DEFAULT_BG_RGB = (0, 0, 0)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8_RGB = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return 232 + gray_step if gray_dist < cube_dist else cube_idx


def _rgb_to_nearest_ansi8(r, g, b):
    """Nearest basic ANSI color index (0-7), for 8-color terminals."""
    return min(range(8), key=lambda i: (r - _ANSI8_RGB[i][0]) ** 2 +
                                       (g - _ANSI8_RGB[i][1]) ** 2 +
                                       (b - _ANSI8_RGB[i][2]) ** 2)


def _resolve_slots(pen_rgb, bg_rgb, num_colors, can_redefine, default_bg):
    """
    Pick curses color numbers for the pen and the background.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - 256+ colors: nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
    Returns (fg, bg) or None when the terminal has too few colors.
    """
    use_default_bg = bg_rgb == DEFAULT_BG_RGB and default_bg == -1

    if can_redefine and num_colors >= 256:
        try:
            curses.init_color(_PEN_SLOT, *(v * 1000 // 255 for v in pen_rgb))
            fg = _PEN_SLOT
        except curses.error:
            logger.warning("init_color failed, using nearest xterm color for pen")
            fg = _rgb_to_nearest_xterm(*pen_rgb)
        if use_default_bg:
            return fg, -1
        try:
            curses.init_color(_BG_SLOT, *(v * 1000 // 255 for v in bg_rgb))
            return fg, _BG_SLOT
        except curses.error:
            logger.warning("init_color failed, using nearest xterm color for background")
            return fg, _rgb_to_nearest_xterm(*bg_rgb)

    if num_colors >= 256:
        bg = -1 if use_default_bg else _rgb_to_nearest_xterm(*bg_rgb)
        return _rgb_to_nearest_xterm(*pen_rgb), bg

    if num_colors >= 8:
        bg = -1 if use_default_bg else _rgb_to_nearest_ansi8(*bg_rgb)
        return _rgb_to_nearest_ansi8(*pen_rgb), bg

    return None


def init_colors(config, pen_rgb=None, bg_rgb=None):
    """
    Initialize curses color pairs for the pen and the background.
    Must run after curses.initscr(). Returns (pen_pair, bg_pair); pair 0 means
    the terminal default colors (mono).
    """
    if not config.use_color:
        return 0, 0

    try:
        if not curses.has_colors():
            logger.info("Terminal has no color support")
            return 0, 0
        curses.start_color()
    except curses.error as e:
        logger.warning("Color initialization failed: %s", e)
        return 0, 0

    # Try to use default background transparency
    default_bg = curses.COLOR_BLACK
    try:
        curses.use_default_colors()
        default_bg = -1
    except curses.error:
        pass

    pen_rgb = pen_rgb or DEFAULT_PEN_RGB
    bg_rgb = bg_rgb or DEFAULT_BG_RGB

    num_colors = getattr(curses, 'COLORS', 8)
    try:
        can_redefine = curses.can_change_color()
    except curses.error:
        can_redefine = False

    slots = _resolve_slots(pen_rgb, bg_rgb, num_colors, can_redefine, default_bg)
    if slots is None:
        logger.info("Only %d colors available, falling back to mono", num_colors)
        return 0, 0
    fg, bg = slots

    try:
        curses.init_pair(PEN_PAIR, fg, bg)
    except curses.error as e:
        logger.warning("Could not init pen color pair: %s", e)
        return 0, 0

    bg_pair = 0
    try:
        # contrast text on bg
        curses.init_pair(BG_PAIR, 7 if bg != 7 else 0, bg)
        bg_pair = BG_PAIR
    except curses.error as e:
        logger.warning("Could not init background color pair: %s", e)

    logger.debug("Colors: %d available, pen slot %d, bg slot %d", num_colors, fg, bg)
    return PEN_PAIR, bg_pair
