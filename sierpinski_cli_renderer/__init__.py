#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .geometry import Point, Segment, Triangle, as_point, midpoint
from .rasterizer import rasterize, draw_line
from .sierpinski import (RenderStats, sierpinski_segments, draw_sierpinski,
                         edge_count, layout_triangles)
from .config import RenderConfig
from .canvas import Canvas, Pen
from .color import parse_hex_color, init_colors
from .errors import SurfaceError
from .renderer import Renderer
