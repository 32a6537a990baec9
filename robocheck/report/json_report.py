# robocheck/report/json_report.py

"""
Генерация JSON-отчёта по разобранному robots.txt.

Сериализация объекта Report в dict / файл.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from robocheck.models import Group, PathRule, Report


def _rule_to_dict(rule: PathRule) -> Dict[str, Any]:
    return {
        "verdict": rule.verdict.value,
        "pattern": rule.pattern.raw,
        "valid": rule.pattern.valid,
        "line": rule.line_number,
    }


def _group_to_dict(group: Group) -> Dict[str, Any]:
    return {
        "user_agents": list(group.user_agents),
        "line": group.line_number,
        "rules": [_rule_to_dict(rule) for rule in group.rules],
    }


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Преобразует Report в словарь, пригодный для json.dumps."""
    return {
        "valid": report.is_valid,
        "valid_directive_count": report.valid_directive_count,
        "unknown_directive_count": report.unknown_directive_count,
        "malformed_line_count": report.malformed_line_count,
        "orphan_rule_count": report.orphan_rule_count,
        "truncated": report.truncated,
        "groups": [_group_to_dict(group) for group in report.groups],
        "sitemaps": list(report.sitemaps),
        "crawl_delays": [
            {
                "group": delay.group_index,
                "value": delay.value,
                "raw": delay.raw_value,
                "line": delay.line_number,
            }
            for delay in report.crawl_delays
        ],
        "lines": [
            {"line": diag.line_number, "kind": diag.kind.value, "field": diag.raw_field}
            for diag in report.lines
        ],
    }


def dumps_report(report: Report, pretty: bool = False) -> str:
    return json.dumps(report_to_dict(report), ensure_ascii=False, indent=2 if pretty else None)


def render_json(report: Report, output_path: Path | str, pretty: bool = True) -> Path:
    """
    Сохраняет report в формате JSON по указанному пути.

    :param report: объект Report
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from robocheck.report.json_report import render_json
    report_path = render_json(parse_robots_txt(text), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dumps_report(report, pretty=pretty), encoding="utf-8")
    return output
