from roundrect.geometry.arc import sample_arc
from roundrect.geometry.path_builder import build_path, resolve_edges, resolve_justification
from roundrect.geometry.radii import check_feasible, correct_radii, radius_scale, relax_radii

__all__ = [
    "build_path",
    "check_feasible",
    "correct_radii",
    "radius_scale",
    "relax_radii",
    "resolve_edges",
    "resolve_justification",
    "sample_arc",
]
