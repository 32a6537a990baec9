# File: robocheck/parser/groups.py
"""robocheck.parser.groups: сборка групп User-agent из потока директив."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from robocheck.logger import logger
from robocheck.matcher.pattern import compile_pattern
from robocheck.models import (
    CrawlDelay,
    Directive,
    DirectiveField,
    Group,
    PathRule,
    Verdict,
)
from robocheck.parser.diagnostics import DiagnosticsReporter

_VERDICTS = {
    DirectiveField.ALLOW: Verdict.ALLOW,
    DirectiveField.DISALLOW: Verdict.DISALLOW,
}


@dataclass
class _OpenGroup:
    line_number: int
    user_agents: List[str] = field(default_factory=list)
    rules: List[PathRule] = field(default_factory=list)
    closed: bool = False

    def freeze(self) -> Group:
        return Group(
            user_agents=tuple(dict.fromkeys(self.user_agents)),
            rules=tuple(self.rules),
            line_number=self.line_number,
        )


@dataclass(frozen=True, slots=True)
class GroupBuildResult:
    groups: Tuple[Group, ...]
    sitemaps: Tuple[str, ...]
    crawl_delays: Tuple[CrawlDelay, ...]


def _parse_delay(value: str) -> Optional[float]:
    try:
        delay = float(value)
    except ValueError:
        return None
    # nan and negative values carry no usable delay
    if not delay >= 0:
        return None
    return delay


class GroupBuilder:
    """Накопитель групп; директивы подаются по одной через :meth:`feed`.

    Подряд идущие User-agent попадают в одну группу. Первая Allow/Disallow
    закрывает группу для новых агентов; следующий User-agent открывает новую.
    Sitemap и Crawl-delay границ групп не меняют.
    """

    def __init__(self, reporter: Optional[DiagnosticsReporter] = None) -> None:
        self.reporter = reporter or DiagnosticsReporter()
        self._groups: List[_OpenGroup] = []
        self._current: Optional[_OpenGroup] = None
        self._sitemaps: List[str] = []
        self._crawl_delays: List[CrawlDelay] = []
        self._rule_count = 0

    def feed(self, directive: Directive) -> None:
        self.reporter.report_directive(directive)
        kind = directive.field
        if kind is DirectiveField.USER_AGENT:
            self._add_user_agent(directive)
        elif kind in _VERDICTS:
            self._add_rule(directive, _VERDICTS[kind])
        elif kind is DirectiveField.SITEMAP:
            if directive.value:
                self._sitemaps.append(directive.value)
        elif kind is DirectiveField.CRAWL_DELAY:
            group_index = len(self._groups) - 1 if self._current else None
            self._crawl_delays.append(
                CrawlDelay(
                    group_index=group_index,
                    value=_parse_delay(directive.value),
                    raw_value=directive.value,
                    line_number=directive.line_number,
                )
            )

    def _add_user_agent(self, directive: Directive) -> None:
        if self._current is None or self._current.closed:
            self._current = _OpenGroup(line_number=directive.line_number)
            self._groups.append(self._current)
        self._current.user_agents.append(directive.value)

    def _add_rule(self, directive: Directive, verdict: Verdict) -> None:
        if self._current is None:
            self.reporter.report_orphan_rule(directive)
            return
        self._current.closed = True
        pattern = compile_pattern(directive.value)
        if not pattern.valid:
            logger.debug("line %d: path %r never matches", directive.line_number, directive.value)
        self._current.rules.append(
            PathRule(
                pattern=pattern,
                verdict=verdict,
                source_order=self._rule_count,
                line_number=directive.line_number,
            )
        )
        self._rule_count += 1

    def build(self) -> GroupBuildResult:
        return GroupBuildResult(
            groups=tuple(group.freeze() for group in self._groups),
            sitemaps=tuple(self._sitemaps),
            crawl_delays=tuple(self._crawl_delays),
        )


def build_groups(
    directives: Iterable[Directive], reporter: Optional[DiagnosticsReporter] = None
) -> GroupBuildResult:
    """Собирает группы из последовательности директив."""
    builder = GroupBuilder(reporter)
    for directive in directives:
        builder.feed(directive)
    return builder.build()


__all__ = ["GroupBuilder", "GroupBuildResult", "build_groups"]
