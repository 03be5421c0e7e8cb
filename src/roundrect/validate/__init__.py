from roundrect.validate.report import format_report, save_report
from roundrect.validate.rules import run_path_checks

__all__ = ["format_report", "run_path_checks", "save_report"]
