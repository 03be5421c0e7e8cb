"""
Geometric checks for a built outline.

Each rule returns a CheckResult; run_path_checks collects them into a
ValidationReport.
"""

from shapely.geometry import box

from roundrect.geometry.path_builder import resolve_edges
from roundrect.geometry.radii import check_feasible
from roundrect.models import CheckResult, Severity, ValidationReport
from roundrect.tracer import get_tracer, trace


@trace(label="run_path_checks")
def run_path_checks(path, rect, tolerance=1e-9):
    """
    Run all checks on a path built for rect.

    Returns ValidationReport.
    """
    tracer = get_tracer()

    checks = [
        check_radii_feasible(path, rect, tolerance),
        check_vertex_count(path),
        check_simple_boundary(path),
        check_within_rect(path, rect, tolerance),
        check_area(path, rect, tolerance),
    ]
    report = ValidationReport(checks=checks)

    tracer.event(f"Path checks complete: {report.error_count} errors, {report.warning_count} warnings")
    return report


def check_radii_feasible(path, rect, tolerance=1e-9):
    """No two neighbouring radii may overlap along their shared edge."""
    violated = check_feasible(rect.width, rect.height, path.radii.as_tuple(), tolerance)
    return CheckResult(
        rule_id="radii_feasible",
        severity=Severity.ERROR,
        passed=not violated,
        message="Corner radii fit their edges" if not violated else f"Radii overlap on edges: {', '.join(violated)}",
        evidence={"violated_edges": violated, "radii": list(path.radii.as_tuple())},
    )


def check_vertex_count(path):
    """n points per rounded corner, one per sharp corner."""
    expected = sum(path.arc_points if r > 0 else 1 for r in path.radii.as_tuple())
    actual = len(path)
    return CheckResult(
        rule_id="vertex_count",
        severity=Severity.ERROR,
        passed=actual == expected,
        message=f"Outline has {actual} vertices (expected {expected})",
        evidence={"expected": expected, "actual": actual},
    )


def check_simple_boundary(path):
    """The outline must not cross itself. Zero-area outlines are skipped."""
    polygon = path.to_polygon()
    if polygon.area == 0:
        return CheckResult(
            rule_id="simple_boundary",
            severity=Severity.ERROR,
            passed=True,
            message="Degenerate outline with zero area",
            evidence={"area": 0.0},
        )
    return CheckResult(
        rule_id="simple_boundary",
        severity=Severity.ERROR,
        passed=bool(polygon.is_valid),
        message="Outline is a simple closed boundary" if polygon.is_valid else "Outline crosses itself",
        evidence={"area": float(polygon.area)},
    )


def check_within_rect(path, rect, tolerance=1e-9):
    """Every vertex must lie on or inside the rectangle."""
    left, right, bottom, top = resolve_edges(rect)
    min_x, min_y, max_x, max_y = path.bounds
    inside = (
        min_x >= left - tolerance
        and max_x <= right + tolerance
        and min_y >= bottom - tolerance
        and max_y <= top + tolerance
    )
    return CheckResult(
        rule_id="within_rect",
        severity=Severity.ERROR,
        passed=inside,
        message="Outline stays inside the rectangle" if inside else "Outline extends past the rectangle edges",
        evidence={"bounds": [min_x, min_y, max_x, max_y], "rect": [left, bottom, right, top]},
    )


def check_area(path, rect, tolerance=1e-9):
    """Rounding can only remove area from the plain rectangle."""
    left, right, bottom, top = resolve_edges(rect)
    plain = box(left, bottom, right, top).area
    area = float(path.to_polygon().area)
    passed = area <= plain + tolerance
    return CheckResult(
        rule_id="area_reasonable",
        severity=Severity.WARN,
        passed=passed,
        message=f"Outline area {area:.6g} of rectangle area {plain:.6g}",
        evidence={"area": area, "rect_area": plain},
    )
