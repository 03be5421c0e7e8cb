"""
Rounded bar charts.

One rounded rectangle per bar, in normalized drawing space. Inputs are
expected to be already mapped into that space (see rescale).
"""

from numbers import Real

import numpy as np

from roundrect.config import RoundRectConfig
from roundrect.draw import draw_rounded_rect, numeric_vector
from roundrect.errors import InvalidInput
from roundrect.models import Shape
from roundrect.paint.canvas import current_canvas
from roundrect.paint.style import make_style
from roundrect.plot.scales import resolution
from roundrect.tracer import get_tracer, trace


# Numeric line types in the usual plotting order.
LINETYPES = ("blank", "solid", "dashed", "dotted", "dotdash", "longdash", "twodash")


def _broadcast(value, n, argument):
    """Repeat a scalar n times, or check a sequence has n entries."""
    if value is None or isinstance(value, (str, Real)):
        return [value] * n
    values = list(value)
    if len(values) != n:
        raise InvalidInput(argument, f"Input '{argument}' must be a single value or have {n} elements, one per bar.")
    return values


def _linetype_name(linetype):
    if isinstance(linetype, Real) and not isinstance(linetype, bool):
        index = int(linetype)
        if 0 <= index < len(LINETYPES):
            return LINETYPES[index]
        raise InvalidInput("linetype", f"Numeric linetype must be between 0 and {len(LINETYPES) - 1}.")
    return linetype


def _corner_radii(r):
    if isinstance(r, Real) and not isinstance(r, bool):
        return (float(r),) * 4
    return numeric_vector(r, 4, "r", non_negative=True)


@trace(label="rounded_bars", arg_names=["width", "baseline"])
def rounded_bars(
    x,
    y,
    width=None,
    r=None,
    baseline=0.0,
    fill=None,
    colour=None,
    linewidth=None,
    linetype="solid",
    alpha=1.0,
    n_points=None,
    config=None,
):
    """
    Build one rounded bar per (x, y) pair.

    Args:
        x: bar centres along the horizontal axis
        y: bar tops; a bar below baseline hangs down from it
        width: bar width; defaults to resolution(x) * config.bars.width_fraction
        r: one radius for all corners or four (tl, tr, br, bl)
        baseline: vertical position bars grow from
        fill, colour, linewidth, linetype, alpha: per-bar or shared paint
            settings (colour None draws no outline)
        n_points: samples per rounded corner
        config: RoundRectConfig

    Returns:
        list of Shape, one per bar
    """
    tracer = get_tracer()
    config = config or RoundRectConfig()

    xs = np.asarray(x, dtype=float).ravel()
    ys = np.asarray(y, dtype=float).ravel()
    if xs.size != ys.size:
        raise InvalidInput("y", f"Inputs 'x' and 'y' must have the same length ({xs.size} != {ys.size}).")
    n = int(xs.size)

    if width is None:
        width = resolution(xs) * config.bars.width_fraction
    corners = _corner_radii(config.bars.radius if r is None else r)

    fills = _broadcast(config.bars.fill if fill is None else fill, n, "fill")
    colours = _broadcast(colour, n, "colour")
    linewidths = _broadcast(config.bars.linewidth if linewidth is None else linewidth, n, "linewidth")
    linetypes = _broadcast(linetype, n, "linetype")
    alphas = _broadcast(alpha, n, "alpha")

    shapes = []
    for i in range(n):
        height = ys[i] - baseline
        style = make_style(
            fill=fills[i],
            stroke_color=colours[i],
            stroke_width=linewidths[i],
            stroke_style=_linetype_name(linetypes[i]),
            opacity=alphas[i],
        )
        path = draw_rounded_rect(
            position=(xs[i], baseline + height / 2.0),
            size=(width, abs(height)),
            corners=corners,
            style=style,
            n_points=n_points,
            output_as_path=True,
            name=f"bar-{i + 1}",
            config=config,
        )
        shapes.append(Shape(path=path, style=style))

    tracer.event(f"Built {len(shapes)} rounded bars", width=float(width))
    return shapes


@trace(label="draw_rounded_bars")
def draw_rounded_bars(x, y, canvas=None, name=None, output_as_shapes=False, config=None, **kwargs):
    """
    Paint rounded bars into a single group on a canvas.

    Keyword arguments go to rounded_bars. With output_as_shapes the shapes
    are returned and nothing is painted.
    """
    config = config or RoundRectConfig()
    shapes = rounded_bars(x, y, config=config, **kwargs)
    if output_as_shapes:
        return shapes

    target = canvas or current_canvas(config.canvas)
    group = target.group(name=name)
    for shape in shapes:
        target.paint_path(shape.path, shape.style, parent=group)
    return None
