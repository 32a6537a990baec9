# File: robocheck/parser/robots_parser.py
"""robocheck.parser.robots_parser: полный разбор robots.txt в неизменяемый Report."""

from __future__ import annotations

from typing import Optional

from robocheck.config import DEFAULT_CONFIG, ParserConfig
from robocheck.logger import logger
from robocheck.models import Report
from robocheck.parser.diagnostics import DiagnosticsReporter
from robocheck.parser.groups import GroupBuilder
from robocheck.parser.lexer import lex
from robocheck.parser.scanner import Document, apply_byte_budget, decode_document, scan_lines


def parse_robots_txt(document: Document, config: Optional[ParserConfig] = None) -> Report:
    """Парсит документ и возвращает Report.

    Args:
        document: содержимое robots.txt (str или bytes; None считается пустым).
        config: настройки парсера; по умолчанию :data:`DEFAULT_CONFIG`.

    Returns:
        Report с группами, счётчиками директив и построчной диагностикой.
        Исключений на любом входе не бросает.
    """
    config = config or DEFAULT_CONFIG
    text, truncated = apply_byte_budget(decode_document(document), config.max_document_bytes)
    if truncated:
        logger.debug("document cut to %d bytes", config.max_document_bytes)

    reporter = DiagnosticsReporter(count_global_directives=config.count_global_directives)
    builder = GroupBuilder(reporter)
    for line in scan_lines(text, config):
        directive = lex(line.text, line.number)
        if directive is None:
            reporter.report_malformed(line.number)
            continue
        builder.feed(directive)

    result = builder.build()
    report = Report(
        valid_directive_count=reporter.valid_directive_count,
        groups=result.groups,
        sitemaps=result.sitemaps,
        crawl_delays=result.crawl_delays,
        unknown_directive_count=reporter.unknown_directive_count,
        malformed_line_count=reporter.malformed_line_count,
        orphan_rule_count=reporter.orphan_rule_count,
        lines=reporter.lines,
        truncated=truncated,
    )
    logger.debug(
        "parsed robots.txt: %d groups, %d valid directives",
        len(report.groups),
        report.valid_directive_count,
    )
    return report


__all__ = ["parse_robots_txt"]
