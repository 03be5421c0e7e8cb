"""
Public entry point for drawing rounded rectangles.

draw_rounded_rect validates its inputs, corrects the corner radii, builds
the outline and either returns it or paints it onto a canvas.
"""

from collections.abc import Mapping, Set
from numbers import Real

import numpy as np

from roundrect.config import RoundRectConfig
from roundrect.errors import InvalidInput
from roundrect.geometry.path_builder import build_path, resolve_justification
from roundrect.geometry.radii import correct_radii
from roundrect.models import CornerRadii, RectSpec
from roundrect.paint.canvas import current_canvas
from roundrect.paint.style import resolve_style
from roundrect.tracer import get_tracer, trace


def numeric_vector(value, length, argument, non_negative=False):
    """
    Check that value is a numeric sequence of exactly `length` finite numbers.

    Returns the values as a tuple of floats; raises InvalidInput naming the
    argument otherwise.
    """
    message = f"Input '{argument}' must be a numeric vector of exactly {length} elements."

    if isinstance(value, (str, bytes, Mapping, Set)) or not hasattr(value, "__len__"):
        raise InvalidInput(argument, message)
    if getattr(value, "ndim", 1) != 1:
        raise InvalidInput(argument, message)
    if not all(isinstance(v, (Real, np.number)) and not isinstance(v, (bool, np.bool_)) for v in value):
        raise InvalidInput(argument, message)

    arr = np.asarray(value, dtype=float)
    if arr.ndim != 1 or arr.size != length:
        raise InvalidInput(argument, message)
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(argument, f"Input '{argument}' must contain only finite numbers.")
    if non_negative and np.any(arr < 0):
        raise InvalidInput(argument, f"Input '{argument}' must not contain negative values.")

    return tuple(arr.tolist())


@trace(label="draw_rounded_rect", arg_names=["just", "n_points", "name"])
def draw_rounded_rect(
    position=(0.5, 0.5),
    size=(1.0, 1.0),
    corners=(0.15, 0.15, 0.15, 0.15),
    style=None,
    *,
    just="centre",
    n_points=None,
    output_as_path=False,
    name=None,
    canvas=None,
    config=None,
):
    """
    Draw a rectangle with an independent radius on each corner.

    Args:
        position: (x, y) of the anchor point, the centre by default
        size: (width, height), both non-negative
        corners: radii (top_left, top_right, bottom_right, bottom_left)
        style: PaintStyle, a dict of make_style keywords, or None for the
            configured defaults
        just: anchor the position refers to, see resolve_justification
        n_points: samples per rounded corner (config.arc.n_points if None)
        output_as_path: return the outline instead of painting it
        name: optional id for the outline
        canvas: Canvas to paint on (the current canvas if None)
        config: RoundRectConfig (defaults if None)

    Returns:
        RoundRectPath when output_as_path is True, otherwise None.

    Raises:
        InvalidInput: corners, position, size, just or style are malformed.
    """
    tracer = get_tracer()
    config = config or RoundRectConfig()

    corners = numeric_vector(corners, 4, "corners", non_negative=True)
    x, y = numeric_vector(position, 2, "position")
    width, height = numeric_vector(size, 2, "size", non_negative=True)
    resolve_justification(just)
    paint_style = resolve_style(style, config.style)

    n_points = config.arc.n_points if n_points is None else n_points
    if isinstance(n_points, bool) or not isinstance(n_points, (int, np.integer)) or n_points < 2:
        raise InvalidInput("n_points", "Input 'n_points' must be an integer of at least 2.")

    radii = correct_radii(
        width,
        height,
        corners,
        strategy=config.correction.strategy,
        tolerance=config.correction.tolerance,
        max_passes=config.correction.max_passes,
    )

    rect = RectSpec(x=x, y=y, width=width, height=height, just=just)
    path = build_path(rect, CornerRadii.from_sequence(radii), n_points=int(n_points), name=name)

    if output_as_path:
        return path

    target = canvas or current_canvas(config.canvas)
    target.paint_path(path, paint_style)
    tracer.event("Rounded rectangle painted", name=name)
    return None
