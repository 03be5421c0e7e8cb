"""
Rounded rectangles with an independent radius on every corner.
"""

from roundrect.draw import draw_rounded_rect
from roundrect.errors import InvalidInput, RoundRectError, UnsupportedOption
from roundrect.geometry import build_path, correct_radii, sample_arc
from roundrect.models import CornerRadii, PaintStyle, RectSpec, RoundRectPath, Shape
from roundrect.paint import Canvas, current_canvas, make_style, new_canvas
from roundrect.plot import draw_rounded_bars, rounded_bars

__version__ = "0.1.0"

__all__ = [
    "Canvas",
    "CornerRadii",
    "InvalidInput",
    "PaintStyle",
    "RectSpec",
    "RoundRectError",
    "RoundRectPath",
    "Shape",
    "UnsupportedOption",
    "build_path",
    "correct_radii",
    "current_canvas",
    "draw_rounded_bars",
    "draw_rounded_rect",
    "make_style",
    "new_canvas",
    "rounded_bars",
    "sample_arc",
]
