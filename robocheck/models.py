# robocheck/models.py
"""
Data models produced by the robots.txt parser and consumed by the resolver.

Everything here is frozen: a :class:`Report` is built once per parse and can
be shared between threads and queried any number of times.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from robocheck.matcher.pattern import CompiledPattern


class DirectiveField(str, Enum):
    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    SITEMAP = "sitemap"
    CRAWL_DELAY = "crawl-delay"
    UNKNOWN = "unknown"


RULE_FIELDS = frozenset({DirectiveField.ALLOW, DirectiveField.DISALLOW})
GROUPING_FIELDS = frozenset({DirectiveField.USER_AGENT}) | RULE_FIELDS
GLOBAL_FIELDS = frozenset({DirectiveField.SITEMAP, DirectiveField.CRAWL_DELAY})


class Verdict(str, Enum):
    ALLOW = "allow"
    DISALLOW = "disallow"


class LineKind(str, Enum):
    """What the parser made of one non-empty logical line."""

    USER_AGENT = "user-agent"
    ALLOW = "allow"
    DISALLOW = "disallow"
    SITEMAP = "sitemap"
    CRAWL_DELAY = "crawl-delay"
    UNKNOWN = "unknown"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class Directive:
    """One ``field: value`` pair; ``raw_field`` keeps the spelling from the file."""

    field: DirectiveField
    raw_field: str
    value: str
    line_number: int


@dataclass(frozen=True, slots=True)
class PathRule:
    pattern: CompiledPattern
    verdict: Verdict
    source_order: int
    line_number: int = 0


@dataclass(frozen=True, slots=True)
class Group:
    """User-agent names sharing one ordered list of rules."""

    user_agents: Tuple[str, ...]
    rules: Tuple[PathRule, ...]
    line_number: int = 0


@dataclass(frozen=True, slots=True)
class CrawlDelay:
    """A recorded (never enforced) Crawl-delay line.

    ``group_index`` points into ``Report.groups`` at the group open on that
    line; None before the first User-agent.
    """

    group_index: Optional[int]
    value: Optional[float]
    raw_value: str
    line_number: int


@dataclass(frozen=True, slots=True)
class LineDiagnostic:
    line_number: int
    kind: LineKind
    raw_field: str = ""


@dataclass(frozen=True, slots=True)
class Decision:
    """Outcome of one query, with the rule that decided it (if any)."""

    allowed: bool
    rule: Optional[PathRule] = None
    user_agents: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Report:
    """Result of parsing one robots.txt document."""

    valid_directive_count: int
    groups: Tuple[Group, ...] = ()
    sitemaps: Tuple[str, ...] = ()
    crawl_delays: Tuple[CrawlDelay, ...] = ()
    unknown_directive_count: int = 0
    malformed_line_count: int = 0
    orphan_rule_count: int = 0
    lines: Tuple[LineDiagnostic, ...] = ()
    truncated: bool = False

    @property
    def is_valid(self) -> bool:
        return self.valid_directive_count > 0
