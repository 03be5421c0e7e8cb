"""
Rounded rectangle outline construction.

Coordinates use a y-up convention: top = bottom + height. Corners are
described once in CORNER_TABLE and every corner is built from the same
code path.
"""

import math

import numpy as np

from roundrect.errors import InvalidInput
from roundrect.geometry.arc import sample_arc
from roundrect.models import CornerRadii, RectSpec, RoundRectPath
from roundrect.tracer import get_tracer, trace


JUSTIFICATIONS = {
    "centre": (0.5, 0.5),
    "center": (0.5, 0.5),
    "left": (0.0, 0.5),
    "right": (1.0, 0.5),
    "bottom": (0.5, 0.0),
    "top": (0.5, 1.0),
}

HORIZONTAL_NAMES = {"left": 0.0, "centre": 0.5, "center": 0.5, "right": 1.0}
VERTICAL_NAMES = {"bottom": 0.0, "centre": 0.5, "center": 0.5, "top": 1.0}

# Emission order. Each entry: corner name, radius index into
# (tl, tr, br, bl), x edge, y edge, inset signs and the arc angle range.
# The end of one arc and the start of the next are joined by a straight edge.
CORNER_TABLE = (
    ("top_left", 0, "left", "top", (1, -1), (math.pi / 2, math.pi)),
    ("bottom_left", 3, "left", "bottom", (1, 1), (math.pi, 3 * math.pi / 2)),
    ("bottom_right", 2, "right", "bottom", (-1, 1), (3 * math.pi / 2, 2 * math.pi)),
    ("top_right", 1, "right", "top", (-1, -1), (0.0, math.pi / 2)),
)


def resolve_justification(just):
    """
    Map an anchor to (hjust, vjust) fractions of width and height.

    Accepts a single name ("centre", "left", "right", "bottom", "top"), a
    (horizontal, vertical) pair of names, or a numeric pair.
    """
    if isinstance(just, str):
        key = just.lower()
        if key not in JUSTIFICATIONS:
            raise InvalidInput("just", f"Unknown justification '{just}'. Expected one of: {', '.join(JUSTIFICATIONS)}.")
        return JUSTIFICATIONS[key]

    if isinstance(just, (list, tuple)) and len(just) == 2:
        if all(isinstance(v, str) for v in just):
            h, v = (s.lower() for s in just)
            if h not in HORIZONTAL_NAMES or v not in VERTICAL_NAMES:
                raise InvalidInput("just", f"Unknown justification pair {tuple(just)}.")
            return HORIZONTAL_NAMES[h], VERTICAL_NAMES[v]
        try:
            return float(just[0]), float(just[1])
        except (TypeError, ValueError):
            pass

    raise InvalidInput("just", "Input 'just' must be a justification name or a pair of names or numbers.")


def resolve_edges(rect):
    """Return (left, right, bottom, top) for a RectSpec."""
    hjust, vjust = resolve_justification(rect.just)
    left = rect.x - rect.width * hjust
    bottom = rect.y - rect.height * vjust
    return left, left + rect.width, bottom, bottom + rect.height


@trace(label="build_path", arg_names=["n_points", "name"])
def build_path(rect, radii, n_points=20, name=None):
    """
    Build the closed outline of a rounded rectangle.

    Radii must already be feasible (see correct_radii). A corner with a
    positive radius contributes n_points arc samples; a zero-radius corner
    contributes the single sharp corner point. Straight edges are the
    segments between consecutive arcs and add no vertices of their own.

    Args:
        rect: RectSpec
        radii: CornerRadii or (tl, tr, br, bl)
        n_points: samples per rounded corner
        name: optional name carried on the path

    Returns:
        RoundRectPath
    """
    tracer = get_tracer()

    if not isinstance(rect, RectSpec):
        rect = RectSpec(**rect)
    if not isinstance(radii, CornerRadii):
        radii = CornerRadii.from_sequence(radii)

    left, right, bottom, top = resolve_edges(rect)
    edges = {"left": left, "right": right, "bottom": bottom, "top": top}
    r = radii.as_tuple()

    pieces = []
    for _, index, x_edge, y_edge, (sx, sy), (start, end) in CORNER_TABLE:
        radius = r[index]
        corner_x, corner_y = edges[x_edge], edges[y_edge]
        if radius > 0:
            center = (corner_x + sx * radius, corner_y + sy * radius)
            pieces.append(sample_arc(center, radius, start, end, n_points))
        else:
            pieces.append(np.array([[corner_x, corner_y]]))

    vertices = np.vstack(pieces)
    tracer.event(f"Built outline with {len(vertices)} vertices", edges=(left, right, bottom, top))

    return RoundRectPath(
        vertices=vertices.tolist(),
        radii=radii,
        arc_points=n_points,
        name=name,
    )
