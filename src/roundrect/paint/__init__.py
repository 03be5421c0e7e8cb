from roundrect.paint.canvas import Canvas, current_canvas, new_canvas, set_current_canvas
from roundrect.paint.style import make_gradient, make_style

__all__ = ["Canvas", "current_canvas", "make_gradient", "make_style", "new_canvas", "set_current_canvas"]
