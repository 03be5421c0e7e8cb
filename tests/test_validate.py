"""Tests for geometric path checks."""

import os

from roundrect.geometry.path_builder import build_path
from roundrect.models import CornerRadii, RectSpec, RoundRectPath, Severity
from roundrect.validate import format_report, run_path_checks, save_report


def _rule(report, rule_id):
    return next(c for c in report.checks if c.rule_id == rule_id)


class TestPathChecks:
    """Tests for run_path_checks."""

    def test_good_path_passes(self, unit_rect):
        path = build_path(unit_rect, (0.3, 0.1, 0.2, 0.2), n_points=16)

        report = run_path_checks(path, unit_rect)

        assert not report.has_errors
        assert report.warning_count == 0
        assert {c.rule_id for c in report.checks} == {
            "radii_feasible", "vertex_count", "simple_boundary", "within_rect", "area_reasonable",
        }

    def test_plain_rectangle_passes(self, unit_rect):
        report = run_path_checks(build_path(unit_rect, (0, 0, 0, 0)), unit_rect)

        assert not report.has_errors

    def test_degenerate_rectangle(self):
        rect = RectSpec(x=0.0, y=0.0, width=0.0, height=1.0)

        report = run_path_checks(build_path(rect, (0, 0, 0, 0)), rect)

        assert not report.has_errors
        assert _rule(report, "simple_boundary").message.startswith("Degenerate")

    def test_uncorrected_radii_flagged(self, unit_rect):
        """Building with overlapping radii is caught."""
        path = build_path(unit_rect, (0.8, 0.8, 0.8, 0.8), n_points=8)

        report = run_path_checks(path, unit_rect)

        assert report.has_errors
        feasible = _rule(report, "radii_feasible")
        assert not feasible.passed
        assert feasible.severity == Severity.ERROR
        assert set(feasible.evidence["violated_edges"]) == {"top", "right", "bottom", "left"}

    def test_vertex_count_mismatch(self, unit_rect):
        path = RoundRectPath(
            vertices=[[-0.5, 0.5], [-0.5, -0.5], [0.5, -0.5]],
            radii=CornerRadii(),
        )

        report = run_path_checks(path, unit_rect)

        assert not _rule(report, "vertex_count").passed

    def test_self_crossing_outline(self, unit_rect):
        path = RoundRectPath(
            vertices=[[-0.5, -0.5], [0.5, -0.5], [-0.5, 0.5], [0.0, 0.5]],
            radii=CornerRadii(),
        )

        report = run_path_checks(path, unit_rect)

        assert not _rule(report, "simple_boundary").passed


class TestReport:
    """Report formatting and saving."""

    def test_format(self, unit_rect):
        report = run_path_checks(build_path(unit_rect, (0.1, 0.1, 0.1, 0.1)), unit_rect)

        text = format_report(report)

        assert "Total checks: 5" in text
        assert "[PASS][ERROR] radii_feasible" in text

    def test_save(self, unit_rect, temp_dir):
        report = run_path_checks(build_path(unit_rect, (0.1, 0.1, 0.1, 0.1)), unit_rect)

        json_path, summary_path = save_report(report, temp_dir)

        assert os.path.exists(json_path)
        assert os.path.exists(summary_path)
