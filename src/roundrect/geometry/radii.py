"""
Corner radius feasibility correction.

Two neighbouring corners share an edge, so their radii must not add up to
more than that edge. Radii are always scaled down by a common factor so the
relative roundness the caller asked for is kept.
"""

from roundrect.errors import UnsupportedOption
from roundrect.tracer import get_tracer, trace


# (pair name, first corner index, second corner index, span: "width" | "height")
# Corner indices follow (top_left, top_right, bottom_right, bottom_left).
EDGE_PAIRS = (
    ("top", 0, 1, "width"),
    ("right", 1, 2, "height"),
    ("bottom", 2, 3, "width"),
    ("left", 3, 0, "height"),
)

STRATEGIES = ("global", "relax")


def _span(width, height, axis):
    return width if axis == "width" else height


def radius_scale(width, height, radii):
    """
    Common scale factor that makes all four radii fit.

    For each shared edge the ratio span / (r1 + r2) is taken (1 when both
    radii are zero); the factor is the smallest ratio, capped at 1.
    """
    ratios = []
    for _, i, j, axis in EDGE_PAIRS:
        total = radii[i] + radii[j]
        ratios.append(_span(width, height, axis) / total if total > 0 else 1.0)
    return min(1.0, *ratios)


def check_feasible(width, height, radii, tolerance=1e-9):
    """Return the names of the edges whose two radii overlap."""
    return [
        name for name, i, j, axis in EDGE_PAIRS
        if radii[i] + radii[j] > _span(width, height, axis) + tolerance
    ]


def relax_radii(width, height, radii, tolerance=1e-9, max_passes=64):
    """
    Pairwise relaxation.

    Walks the four edges in order and scales any overlapping pair so it
    exactly fits its edge, repeating until a full pass changes nothing. If
    the pass budget runs out the result is finished with the global factor.
    """
    tracer = get_tracer()
    r = [float(v) for v in radii]

    for n_pass in range(1, max_passes + 1):
        changed = False
        for _, i, j, axis in EDGE_PAIRS:
            span = _span(width, height, axis)
            total = r[i] + r[j]
            if total > span + tolerance:
                factor = span / total
                r[i] *= factor
                r[j] *= factor
                changed = True
        if not changed:
            tracer.event(f"Relaxation settled after {n_pass} passes", level="DEBUG")
            return tuple(r)

    tracer.event(f"Relaxation did not settle in {max_passes} passes", level="WARN")
    s = radius_scale(width, height, r)
    return tuple(v * s for v in r)


@trace(label="correct_radii", arg_names=["strategy", "max_passes"])
def correct_radii(width, height, radii, strategy="global", tolerance=1e-9, max_passes=64):
    """
    Scale four requested radii so no two neighbours overlap.

    Args:
        width: rectangle width, >= 0
        height: rectangle height, >= 0
        radii: (top_left, top_right, bottom_right, bottom_left), each >= 0
        strategy: "global" (single common factor) or "relax" (pairwise)
        tolerance: slack allowed on each edge constraint
        max_passes: pass budget for the "relax" strategy

    Returns:
        tuple of four corrected radii
    """
    tracer = get_tracer()
    radii = tuple(float(v) for v in radii)

    if strategy == "global":
        s = radius_scale(width, height, radii)
        if s >= 1.0:
            return radii
        tracer.event(f"Scaling radii by {s:.6f}", radii=radii)
        return tuple(v * s for v in radii)

    if strategy == "relax":
        return relax_radii(width, height, radii, tolerance=tolerance, max_passes=max_passes)

    raise UnsupportedOption(
        "strategy",
        f"Unknown correction strategy '{strategy}'. Expected one of: {', '.join(STRATEGIES)}.",
    )
