# File: robocheck/report/__init__.py
"""robocheck.report: сериализация Report для CLI и тестов."""

from robocheck.report.json_report import dumps_report, render_json, report_to_dict

__all__ = ["dumps_report", "render_json", "report_to_dict"]
