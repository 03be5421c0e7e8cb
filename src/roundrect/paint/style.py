"""
Paint style construction.

Turns loose keyword arguments (a colour, a list of colours, stroke settings)
into a validated PaintStyle record. The geometry never looks inside it.
"""

import numpy as np
from pydantic import ValidationError

from roundrect.errors import InvalidInput, UnsupportedOption
from roundrect.models import GradientFill, PaintStyle, SolidFill
from roundrect.paint.canvas import DASH_PATTERNS, LINE_CAPS


GRADIENT_TYPES = ("linear", "radial")

STROKE_STYLES = tuple(DASH_PATTERNS) + ("blank",)

STYLE_FIELDS = (
    "fill",
    "stroke_color",
    "stroke_width",
    "stroke_style",
    "stroke_cap",
    "opacity",
    "gradient_type",
    "gradient_stops",
)


def make_gradient(colors, stops=None, kind="linear"):
    """
    Build a gradient fill from two or more colours.

    Stops default to evenly spaced positions from 0 to 1.
    """
    if kind not in GRADIENT_TYPES:
        raise UnsupportedOption("gradient_type", "Unknown gradient_type. Gradients must be 'linear' or 'radial'.")

    colors = [str(c) for c in colors]
    if len(colors) < 2:
        raise InvalidInput("fill", "A gradient needs at least 2 colours.")

    if stops is None:
        stops = np.linspace(0.0, 1.0, len(colors)).tolist()
    elif len(stops) != len(colors):
        raise InvalidInput(
            "gradient_stops",
            f"Input 'gradient_stops' must have {len(colors)} elements, one per colour; got {len(stops)}.",
        )

    try:
        return GradientFill(kind=kind, colors=colors, stops=[float(s) for s in stops])
    except ValidationError as e:
        raise InvalidInput("gradient_stops", str(e)) from e


def make_fill(fill, gradient_type="linear", gradient_stops=None):
    """None for no fill, one colour for a solid fill, several for a gradient."""
    if fill is None:
        return None
    if isinstance(fill, (SolidFill, GradientFill)):
        return fill
    if isinstance(fill, str):
        return SolidFill(color=fill)
    if isinstance(fill, (bytes, dict)) or not hasattr(fill, "__iter__"):
        raise InvalidInput("fill", "Input 'fill' must be a colour name or a sequence of colour names.")
    fill = list(fill)
    if not fill or not all(isinstance(c, str) for c in fill):
        raise InvalidInput("fill", "Input 'fill' must be a colour name or a sequence of colour names.")
    if len(fill) == 1:
        return SolidFill(color=str(fill[0]))
    return make_gradient(fill, stops=gradient_stops, kind=gradient_type)


def check_stroke(stroke_style, stroke_cap):
    """Reject stroke styles and caps the canvas cannot draw."""
    if stroke_style not in STROKE_STYLES:
        raise UnsupportedOption(
            "stroke_style",
            f"Unknown stroke_style '{stroke_style}'. Expected one of: {', '.join(STROKE_STYLES)}.",
        )
    if stroke_cap not in LINE_CAPS:
        raise UnsupportedOption(
            "stroke_cap",
            f"Unknown stroke_cap '{stroke_cap}'. Expected one of: {', '.join(LINE_CAPS)}.",
        )


def make_style(
    fill=None,
    stroke_color="black",
    stroke_width=1.0,
    stroke_style="solid",
    stroke_cap="round",
    opacity=1.0,
    gradient_type="linear",
    gradient_stops=None,
):
    """
    Build a PaintStyle.

    A fill given as a sequence of colours becomes a linear or radial
    gradient; stroke_color=None disables the outline.
    """
    check_stroke(stroke_style, stroke_cap)
    fill_value = make_fill(fill, gradient_type=gradient_type, gradient_stops=gradient_stops)

    try:
        return PaintStyle(
            fill=fill_value,
            stroke_color=stroke_color,
            stroke_width=stroke_width,
            stroke_style=stroke_style,
            stroke_cap=stroke_cap,
            opacity=opacity,
        )
    except ValidationError as e:
        raise InvalidInput("style", f"Invalid paint style: {e}") from e


def style_from_config(style_config, **overrides):
    """Build a PaintStyle from a StyleConfig, with keyword overrides."""
    values = {
        "fill": style_config.fill,
        "stroke_color": style_config.stroke_color,
        "stroke_width": style_config.stroke_width,
        "stroke_style": style_config.stroke_style,
        "stroke_cap": style_config.stroke_cap,
        "opacity": style_config.opacity,
        "gradient_type": style_config.gradient_type,
    }
    values.update(overrides)
    return make_style(**values)


def resolve_style(style, style_config):
    """
    Accept a PaintStyle, a mapping of make_style keywords, or None.

    None falls back to the configured defaults.
    """
    if style is None:
        return style_from_config(style_config)
    if isinstance(style, PaintStyle):
        check_stroke(style.stroke_style, style.stroke_cap)
        return style
    if isinstance(style, dict):
        unknown = set(style) - set(STYLE_FIELDS)
        if unknown:
            raise InvalidInput("style", f"Unknown style fields: {', '.join(sorted(unknown))}.")
        return style_from_config(style_config, **style)
    raise InvalidInput("style", "Input 'style' must be a PaintStyle, a mapping of style fields, or None.")
