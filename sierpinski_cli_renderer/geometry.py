#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/geometry.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import Any, NamedTuple, Tuple


class Point(NamedTuple):
    """Integer grid coordinate. Compares equal to a plain (x, y) tuple."""
    x: int
    y: int

    def __repr__(self):
        return f"Point({self.x}, {self.y})"


def as_point(value) -> Point:
    """Coerce a Point or any (x, y) pair of integers into a Point."""
    if isinstance(value, Point):
        return value
    x, y = value
    try:
        integral = int(x) == x and int(y) == y
    except (OverflowError, TypeError):
        integral = False
    if not integral:
        raise ValueError(f"Grid coordinates must be integers, got {value!r}")
    return Point(int(x), int(y))


def midpoint(p: Point, q: Point) -> Point:
    """Floor-averaged midpoint. midpoint(p, q) == midpoint(q, p)."""
    return Point((p.x + q.x) // 2, (p.y + q.y) // 2)


class Segment(NamedTuple):
    """Two endpoints and the pen used to draw between them."""
    start: Point
    end: Point
    pen: Any = None


class Triangle(NamedTuple):
    """
    Triangle with fixed vertex roles.

    a is the apex, b the lower-left vertex and c the lower-right vertex.
    Subdivision keeps those roles in every child, so edges line up between
    recursion levels.
    """
    a: Point
    b: Point
    c: Point

    @classmethod
    def of(cls, a, b, c) -> 'Triangle':
        return cls(as_point(a), as_point(b), as_point(c))

    def edges(self) -> Tuple[Tuple[Point, Point], ...]:
        """Edges in draw order: A-B, B-C, C-A."""
        return ((self.a, self.b), (self.b, self.c), (self.c, self.a))

    def subdivide(self) -> Tuple['Triangle', 'Triangle', 'Triangle']:
        """Split into the left, right and upper half-scale corner triangles."""
        ab = midpoint(self.a, self.b)
        ac = midpoint(self.a, self.c)
        bc = midpoint(self.b, self.c)
        return (
            Triangle(ab, self.b, bc),  # left
            Triangle(ac, bc, self.c),  # right
            Triangle(self.a, ab, ac),  # upper
        )
