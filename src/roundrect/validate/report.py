"""
Path check report output.
"""

import os

from roundrect.io.save_artifacts import ensure_dir, save_json
from roundrect.tracer import get_tracer


def format_check_result(check):
    """Format a single check result for display."""
    status = "PASS" if check.passed else "FAIL"
    return f"[{status}][{check.severity.value.upper()}] {check.rule_id}: {check.message}"


def format_report(report):
    """Human-readable summary of a ValidationReport."""
    passed = [c for c in report.checks if c.passed]
    failed = [c for c in report.checks if not c.passed]

    lines = [
        "Rounded rectangle path checks",
        "=" * 40,
        f"Total checks: {len(report.checks)}",
        f"Passed: {len(passed)}",
        f"Failed: {len(failed)}",
        "",
    ]
    lines.extend(format_check_result(c) for c in report.checks)
    return "\n".join(lines)


def save_report(report, out_dir):
    """
    Write path_checks.json and path_checks.txt to out_dir.

    Returns (json_path, summary_path).
    """
    tracer = get_tracer()

    json_path = os.path.join(out_dir, "path_checks.json")
    save_json(report, json_path)

    summary_path = os.path.join(out_dir, "path_checks.txt")
    ensure_dir(out_dir)
    with open(summary_path, "w", encoding="utf-8") as f:
        f.write(format_report(report))

    tracer.event(f"Report saved: {len(report.checks)} checks, {report.error_count} errors")
    return json_path, summary_path
