import pytest

from sierpinski_cli_renderer.errors import SurfaceError
from sierpinski_cli_renderer.geometry import Triangle
from sierpinski_cli_renderer.rasterizer import rasterize
from sierpinski_cli_renderer.sierpinski import (
    RenderStats, draw_sierpinski, edge_count, layout_triangles, sierpinski_segments)

from conftest import FailingSurface

TRI = Triangle.of((32, 0), (0, 31), (64, 31))


@pytest.mark.parametrize("depth", [0, -1, -5])
def test_terminal_depth_draws_nothing(surface, depth):
    stats = draw_sierpinski(surface, TRI, depth, "*")
    assert surface.calls == []
    assert stats == RenderStats(0, 0)


@pytest.mark.parametrize("depth, expected", [(0, 0), (1, 3), (2, 12), (3, 39), (4, 120)])
def test_edge_count(depth, expected):
    assert edge_count(depth) == expected
    assert len(list(sierpinski_segments(TRI, depth))) == expected


def test_edge_count_recurrence():
    for d in range(1, 8):
        assert edge_count(d) == 3 + 3 * edge_count(d - 1)


def test_depth_one_draws_the_three_edges():
    t = Triangle.of((0, 50), (25, 0), (50, 50))
    segments = list(sierpinski_segments(t, 1, pen="x"))
    assert [(s.start, s.end) for s in segments] == [
        ((0, 50), (25, 0)), ((25, 0), (50, 50)), ((50, 50), (0, 50))]
    assert {s.pen for s in segments} == {"x"}

    for s in segments:
        cells = rasterize(s.start, s.end)
        steep = abs(s.end.y - s.start.y) > abs(s.end.x - s.start.x)
        major = [c.y for c in cells] if steep else [c.x for c in cells]
        assert len(set(major)) == len(major)
        assert major == sorted(major) or major == sorted(major, reverse=True)


def test_depth_one_rasterizes_exactly_three_segments(surface):
    t = Triangle.of((0, 50), (25, 0), (50, 50))
    stats = draw_sierpinski(surface, t, 1, "*")
    assert stats.segments == 3
    expected = (len(rasterize((0, 50), (25, 0))) + len(rasterize((25, 0), (50, 50)))
                + len(rasterize((50, 50), (0, 50))))
    assert stats.points == expected == len(surface.calls)


def test_children_drawn_before_own_edges():
    segments = list(sierpinski_segments(TRI, 2))
    left, right, upper = TRI.subdivide()
    assert [(s.start, s.end) for s in segments[:3]] == list(left.edges())
    assert [(s.start, s.end) for s in segments[3:6]] == list(right.edges())
    assert [(s.start, s.end) for s in segments[6:9]] == list(upper.edges())
    assert [(s.start, s.end) for s in segments[-3:]] == list(TRI.edges())


def test_output_is_deterministic():
    assert list(sierpinski_segments(TRI, 4)) == list(sierpinski_segments(TRI, 4))


def test_plot_count_grows_with_depth():
    counts = []
    for depth in range(6):
        counts.append(draw_sierpinski(_Counter(), TRI, depth, "*").points)
    assert all(a < b for a, b in zip(counts, counts[1:]))


def test_stats_match_plot_calls(surface):
    stats = draw_sierpinski(surface, TRI, 3, "*")
    assert stats.segments == edge_count(3)
    assert stats.points == len(surface.calls)


def test_surface_failure_propagates():
    with pytest.raises(SurfaceError):
        draw_sierpinski(FailingSurface(fail_after=10), TRI, 3, "*")


def test_stats_add():
    assert RenderStats(1, 2) + RenderStats(3, 4) == RenderStats(4, 6)


def test_layout_fits_inside_area():
    triangles = layout_triangles(130, 40, 2, aspect=2)
    assert len(triangles) == 2
    for t in triangles:
        for p in t:
            assert 0 <= p.x < 130 and 0 <= p.y < 40
        assert t.a.y == 0
        assert t.b.y == t.c.y
    assert triangles[0].c.x < triangles[1].b.x


def test_layout_square_pixels():
    (t,) = layout_triangles(100, 40, 1, aspect=1)
    assert t.c.x - t.b.x == 40
    assert t.b.y == 39


@pytest.mark.parametrize("w, h, n", [(100, 40, 0), (0, 40, 1), (3, 40, 2), (100, 1, 1)])
def test_layout_nothing_fits(w, h, n):
    assert layout_triangles(w, h, n) == []


class _Counter:
    def __init__(self):
        self.n = 0

    def plot(self, x, y, pen):
        self.n += 1
