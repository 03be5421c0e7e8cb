"""
SVG paint surface for roundrect.

A Canvas maps model coordinates (y-up, in npc, snpc or px units) onto an
svgwrite drawing and paints outlines with their PaintStyle.
"""

import itertools
import re

import numpy as np
import svgwrite

from roundrect.errors import UnsupportedOption
from roundrect.io.save_artifacts import render_svg_to_png, save_svg
from roundrect.models import GradientFill, SolidFill
from roundrect.tracer import get_tracer, trace


UNITS = ("npc", "snpc", "px")

# Dash patterns as on/off lengths in multiples of the stroke width.
DASH_PATTERNS = {
    "solid": None,
    "dashed": (4, 4),
    "dotted": (1, 3),
    "dotdash": (1, 3, 4, 3),
    "longdash": (7, 3),
    "twodash": (2, 2, 6, 2),
}

LINE_CAPS = {"round": "round", "butt": "butt", "square": "square"}

_GREY_LEVEL = re.compile(r"^gr[ae]y(\d{1,3})$")


def svg_color(color):
    """
    Translate a colour name for SVG.

    Numbered greys (grey0 .. grey100) become rgb() values; anything else is
    passed through unchanged.
    """
    if color is None:
        return "none"
    match = _GREY_LEVEL.match(color.lower())
    if match:
        level = min(int(match.group(1)), 100)
        value = int(round(level * 255 / 100))
        return f"rgb({value},{value},{value})"
    return color


class Canvas:
    """
    Drawing surface backed by an svgwrite Drawing.

    Model y grows upward; the SVG y axis grows downward, so y is flipped on
    the way out.
    """

    def __init__(self, width_px=400, height_px=400, units="npc", background=None):
        if units not in UNITS:
            raise UnsupportedOption("units", f"Unknown canvas units '{units}'. Expected one of: {', '.join(UNITS)}.")

        self.width_px = width_px
        self.height_px = height_px
        self.units = units
        self._gradient_ids = itertools.count(1)

        self.drawing = svgwrite.Drawing(size=(f"{width_px}px", f"{height_px}px"), debug=False)
        self.drawing.viewbox(0, 0, width_px, height_px)

        if background:
            self.drawing.add(self.drawing.rect(
                insert=(0, 0), size=(width_px, height_px), fill=svg_color(background),
            ))

    @classmethod
    def from_config(cls, canvas_config):
        return cls(
            width_px=canvas_config.width_px,
            height_px=canvas_config.height_px,
            units=canvas_config.units,
            background=canvas_config.background,
        )

    def scale(self):
        """(sx, sy) device pixels per model unit."""
        if self.units == "npc":
            return float(self.width_px), float(self.height_px)
        if self.units == "snpc":
            side = float(min(self.width_px, self.height_px))
            return side, side
        return 1.0, 1.0

    def to_device(self, vertices):
        """Map model vertices to SVG pixel coordinates."""
        sx, sy = self.scale()
        pts = np.asarray(vertices, dtype=float).reshape(-1, 2)
        return np.column_stack([pts[:, 0] * sx, self.height_px - pts[:, 1] * sy])

    def path_data(self, path):
        """SVG path data for a RoundRectPath in device coordinates."""
        pts = self.to_device(path.vertices)
        if len(pts) == 0:
            return ""
        commands = [f"M {pts[0, 0]:.3f} {pts[0, 1]:.3f}"]
        commands.extend(f"L {x:.3f} {y:.3f}" for x, y in pts[1:])
        commands.append("Z")
        return " ".join(commands)

    def group(self, name=None, parent=None):
        """Add and return an SVG group, used for batches of shapes."""
        extra = {"id": name} if name else {}
        g = self.drawing.g(**extra)
        (self.drawing if parent is None else parent).add(g)
        return g

    def _paint_server(self, fill):
        if fill is None:
            return "none"
        if isinstance(fill, SolidFill):
            return svg_color(fill.color)
        if isinstance(fill, GradientFill):
            gradient_id = f"gradient-{next(self._gradient_ids)}"
            if fill.kind == "linear":
                # First colour at the bottom edge.
                gradient = self.drawing.linearGradient(start=(0, 1), end=(0, 0), id=gradient_id)
            else:
                gradient = self.drawing.radialGradient(center=(0.5, 0.5), r=0.5, id=gradient_id)
            for offset, color in zip(fill.stops, fill.colors):
                gradient.add_stop_color(offset=offset, color=svg_color(color))
            self.drawing.defs.add(gradient)
            return gradient.get_paint_server()
        raise UnsupportedOption("fill", f"Unsupported fill type {type(fill).__name__}.")

    def _stroke_attributes(self, style):
        if style.stroke_style not in DASH_PATTERNS and style.stroke_style != "blank":
            raise UnsupportedOption(
                "stroke_style",
                f"Unknown stroke_style '{style.stroke_style}'. Expected one of: {', '.join(DASH_PATTERNS)}, blank.",
            )
        if style.stroke_cap not in LINE_CAPS:
            raise UnsupportedOption(
                "stroke_cap",
                f"Unknown stroke_cap '{style.stroke_cap}'. Expected one of: {', '.join(LINE_CAPS)}.",
            )

        if style.stroke_color is None or style.stroke_style == "blank" or style.stroke_width == 0:
            return {"stroke": "none"}

        attrs = {
            "stroke": svg_color(style.stroke_color),
            "stroke_width": style.stroke_width,
            "stroke_linecap": LINE_CAPS[style.stroke_cap],
        }
        pattern = DASH_PATTERNS[style.stroke_style]
        if pattern:
            attrs["stroke_dasharray"] = ",".join(f"{n * style.stroke_width:g}" for n in pattern)
        return attrs

    @trace(label="paint_path")
    def paint_path(self, path, style, parent=None):
        """
        Paint one outline with the even-odd fill rule.

        Returns the svgwrite path element.
        """
        tracer = get_tracer()

        stroke = self._stroke_attributes(style)
        extra = {"id": path.name} if path.name else {}
        element = self.drawing.path(
            d=self.path_data(path),
            fill=self._paint_server(style.fill),
            fill_rule=path.fill_rule,
            opacity=style.opacity,
            **stroke,
            **extra,
        )
        (self.drawing if parent is None else parent).add(element)

        tracer.event(f"Painted path with {len(path)} vertices", path=path)
        return element

    def tostring(self):
        return self.drawing.tostring()

    def save(self, svg_path):
        """Write the drawing as SVG."""
        save_svg(self.drawing, svg_path)

    def render_png(self, svg_path, png_path, dpi=150):
        """Save as SVG, then rasterise to PNG. Returns True if a PNG was written."""
        self.save(svg_path)
        return render_svg_to_png(svg_path, png_path, dpi=dpi)


_current_canvas = None


def new_canvas(config=None):
    """Replace the current canvas with a fresh one and return it."""
    global _current_canvas
    if config is None:
        from roundrect.config import CanvasConfig
        config = CanvasConfig()
    _current_canvas = Canvas.from_config(config)
    return _current_canvas


def current_canvas(config=None):
    """Return the current canvas, creating one on first use."""
    if _current_canvas is None:
        return new_canvas(config)
    return _current_canvas


def set_current_canvas(canvas):
    """Make an existing canvas the current one."""
    global _current_canvas
    _current_canvas = canvas
    return canvas
