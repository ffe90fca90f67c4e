#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/sierpinski.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging
from typing import Iterator, List, NamedTuple

from .geometry import Point, Segment, Triangle
from .rasterizer import draw_line

logger = logging.getLogger(__name__)


class RenderStats(NamedTuple):
    """Totals for one drawing pass."""
    segments: int = 0
    points: int = 0

    def __add__(self, other):
        return RenderStats(self.segments + other.segments,
                           self.points + other.points)


def sierpinski_segments(triangle: Triangle, depth: int, pen=None) -> Iterator[Segment]:
    """
    Yields the edges of a Sierpinski triangle in draw order.

    The Sierpinski triangle halves every side (s = 1/2) and keeps three of the
    four parts (N = 3), so its fractal dimension is log(3) / log(2) = 1.58496...

    Depth 0 yields nothing at all. Above that, the left, right and upper
    children are expanded first at depth - 1, then the three edges of the
    triangle itself follow, so a parent border lands on top of its children.
    """
    if depth <= 0:
        return

    for child in triangle.subdivide():
        yield from sierpinski_segments(child, depth - 1, pen)

    for start, end in triangle.edges():
        yield Segment(start, end, pen)


def draw_sierpinski(surface, triangle: Triangle, depth: int, pen) -> RenderStats:
    """Rasterizes every edge of the fractal onto surface.plot(x, y, pen)."""
    segments = 0
    points = 0
    for seg in sierpinski_segments(triangle, depth, pen):
        points += draw_line(surface, seg.start, seg.end, seg.pen)
        segments += 1

    logger.debug("Drew depth %d triangle %s: %d segments, %d points",
                 depth, tuple(triangle), segments, points)
    return RenderStats(segments, points)


def edge_count(depth: int) -> int:
    """Number of segments drawn at depth: E(0) = 0, E(d) = 3 + 3 * E(d - 1)."""
    if depth <= 0:
        return 0
    return 3 * (3 ** depth - 1) // 2


def layout_triangles(width: int, height: int, count: int, aspect: int = 2) -> List[Triangle]:
    """
    Places count upright triangles side by side in a width x height area.

    Each triangle hangs from the top row and is as tall as its slot allows,
    with a base aspect times its height. aspect is 2 when one pixel is one
    terminal cell and 1 when pixels are square (braille dots).
    """
    if count <= 0 or width <= 0 or height <= 0:
        return []

    slot_w = width // count
    tri_h = min(height, (slot_w - 1) // aspect)
    if tri_h < 2:
        return []

    half = (tri_h * aspect) // 2
    bottom = tri_h - 1
    triangles = []
    for i in range(count):
        # Centre the triangle in its slot
        left = i * slot_w + (slot_w - 2 * half) // 2
        triangles.append(Triangle(Point(left + half, 0),
                                  Point(left, bottom),
                                  Point(left + 2 * half, bottom)))
    return triangles
