# File: robocheck/parser/diagnostics.py
"""robocheck.parser.diagnostics: tallies what the parser accepted and skipped."""

from __future__ import annotations

from typing import List, Tuple

from robocheck.logger import logger
from robocheck.models import (
    GLOBAL_FIELDS,
    GROUPING_FIELDS,
    Directive,
    DirectiveField,
    LineDiagnostic,
    LineKind,
)


class DiagnosticsReporter:
    """Side channel of one parse.

    ``valid_directive_count`` grows for every User-agent, Allow and Disallow
    line, whether or not it ends up inside a group. Sitemap and Crawl-delay
    are counted only with ``count_global_directives``.
    """

    def __init__(self, count_global_directives: bool = False) -> None:
        self.count_global_directives = count_global_directives
        self.valid_directive_count = 0
        self.unknown_directive_count = 0
        self.malformed_line_count = 0
        self.orphan_rule_count = 0
        self._lines: List[LineDiagnostic] = []

    def report_directive(self, directive: Directive) -> None:
        field = directive.field
        if field is DirectiveField.UNKNOWN:
            self.unknown_directive_count += 1
            logger.debug("line %d: unknown directive %r ignored", directive.line_number, directive.raw_field)
        elif field in GROUPING_FIELDS or (self.count_global_directives and field in GLOBAL_FIELDS):
            self.valid_directive_count += 1
        self._lines.append(
            LineDiagnostic(directive.line_number, LineKind(field.value), directive.raw_field)
        )

    def report_malformed(self, line_number: int) -> None:
        self.malformed_line_count += 1
        logger.debug("line %d: no field separator, line skipped", line_number)
        self._lines.append(LineDiagnostic(line_number, LineKind.MALFORMED))

    def report_orphan_rule(self, directive: Directive) -> None:
        self.orphan_rule_count += 1
        logger.debug("line %d: %s before any User-agent discarded", directive.line_number, directive.raw_field)

    @property
    def lines(self) -> Tuple[LineDiagnostic, ...]:
        return tuple(self._lines)


__all__ = ["DiagnosticsReporter"]
