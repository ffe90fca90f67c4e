#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Iterator, List, NamedTuple, Tuple


class Pen(NamedTuple):
    """Drawing pen understood by Canvas: a glyph and a curses color pair id."""
    glyph: str = '*'
    color: int = 0


class Canvas:
    """
    In-memory pixel surface for the rasterizer.

    In glyph mode every pixel is one terminal cell and shows the pen glyph.
    In braille mode every terminal cell holds 2x4 pixels packed into a
    Unicode braille character. Either way the last pen plotted into a cell
    decides its color.
    """
    __slots__ = ['w', 'h', 'braille', 'cell_w', 'cell_h', 'grid', 'p_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h, braille=False):
        self.w, self.h = w, h
        self.braille = braille
        self.cell_w, self.cell_h = (2, 4) if braille else (1, 1)
        cols = -(-w // self.cell_w)
        rows = -(-h // self.cell_h)
        # Grid stores 8-bit dot masks per cell
        self.grid = [[0] * cols for _ in range(rows)]
        # Pen grid stores the last pen written into each cell
        self.p_grid = [[None] * cols for _ in range(rows)]

    @classmethod
    def for_terminal(cls, cols: int, rows: int, braille: bool = False) -> 'Canvas':
        """Canvas covering a terminal, minus the status line at the bottom."""
        cols = max(0, cols - 1)
        rows = max(0, rows - 1)
        if braille:
            return cls(cols * 2, rows * 4, braille=True)
        return cls(cols, rows)

    @property
    def size(self) -> Tuple[int, int]:
        """(columns, rows) in terminal cells."""
        return (len(self.grid[0]) if self.grid else 0, len(self.grid))

    def plot(self, x, y, pen):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        if self.braille:
            cx, cy = x >> 1, y >> 2
            # (y & 3) gives row 0-3 in block, (x & 1) gives col 0-1 in block
            # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
            self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        else:
            cx, cy = x, y
            self.grid[cy][cx] = 1
        self.p_grid[cy][cx] = pen

    def clear(self):
        for row in self.grid:
            row[:] = [0] * len(row)
        for row in self.p_grid:
            row[:] = [None] * len(row)

    def cells(self) -> Iterator[Tuple[int, int, str, Pen]]:
        """Yields (row, col, char, pen) for every non-empty cell."""
        for y, row in enumerate(self.grid):
            pens = self.p_grid[y]
            for x, mask in enumerate(row):
                if not mask:
                    continue
                pen = pens[x]
                if self.braille:
                    char = render_cell_braille(mask)
                else:
                    char = render_cell_glyph(pen)
                yield y, x, char, pen

    def rows(self) -> List[str]:
        """The canvas as plain text lines, trailing blanks stripped."""
        cols, nrows = self.size
        lines = [[' '] * cols for _ in range(nrows)]
        for y, x, char, _pen in self.cells():
            lines[y][x] = char
        return [''.join(line).rstrip() for line in lines]


def render_cell_glyph(pen) -> str:
    """Glyph for a filled cell. Pens without a glyph show as '*'."""
    glyph = getattr(pen, 'glyph', None)
    if isinstance(glyph, str) and glyph:
        return glyph
    if isinstance(pen, str) and pen:
        return pen
    return '*'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
