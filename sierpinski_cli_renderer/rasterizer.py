#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import List

from .geometry import Point, as_point


def rasterize(p0, p1) -> List[Point]:
    """
    Returns the grid cells of the segment p0 -> p1, both ends included.

    Integer-only plotter method: the major axis advances one cell per step,
    and a decision accumulator, seeded with the major delta, has the minor
    delta subtracted after every plot. Whenever it has dropped to <= 0 the
    minor axis advances one cell and the major delta is added back.

    The walk always runs in ascending major-axis order, so both directions
    of a segment cover the same cells. The list is reversed when needed to
    keep it ordered from p0 to p1.
    """
    p0, p1 = as_point(p0), as_point(p1)
    if p0 == p1:
        return [p0]

    dx = abs(p1.x - p0.x)
    dy = abs(p1.y - p0.y)
    steep = dy > dx

    # Canonical order: ascending along the major axis
    swapped = (p0.y > p1.y) if steep else (p0.x > p1.x)
    start, end = (p1, p0) if swapped else (p0, p1)

    if steep:
        # Transpose so a single shallow walk serves every octant
        major, minor = start.y, start.x
        d_major, d_minor = dy, dx
        step = 1 if end.x >= start.x else -1
    else:
        major, minor = start.x, start.y
        d_major, d_minor = dx, dy
        step = 1 if end.y >= start.y else -1

    cells = []
    dec = d_major
    for _ in range(d_major + 1):
        if dec <= 0:
            dec += d_major
            minor += step
        cells.append(Point(minor, major) if steep else Point(major, minor))
        dec -= d_minor
        major += 1

    if swapped:
        cells.reverse()
    return cells


def draw_line(surface, p0, p1, pen) -> int:
    """
    Plots the segment p0 -> p1 onto surface with pen.

    The surface must provide plot(x, y, pen). Coordinates are not clipped
    here; that is the surface's job. Returns the number of plot calls.
    """
    count = 0
    for x, y in rasterize(p0, p1):
        surface.plot(x, y, pen)
        count += 1
    return count
