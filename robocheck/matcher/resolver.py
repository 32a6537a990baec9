# File: robocheck/matcher/resolver.py
"""
Rule resolution: which group applies to a user-agent and which rule in it
decides a path.

Group choice
    Agent names from the file and the queried agent are both reduced to a
    product token: lower-cased and cut at the first space or ``/``. A group
    name matches when it is a substring of the queried token; the longest
    matching name wins and every group that ties on it contributes its rules.
    Groups naming ``*`` are used only when no specific name matches.

Rule choice
    Longest raw pattern wins, then Allow over Disallow, then the later rule.

No group, no matching rule, or a winning match of zero length all mean
*allowed*.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from robocheck.matcher.pattern import match_length
from robocheck.models import Decision, Group, PathRule, Report, Verdict

WILDCARD_AGENT = "*"

_TOKEN_END = re.compile(r"[ /]")
_PATH_START = "/?;"


def agent_token(user_agent: str) -> str:
    """``"GoodBot/1.0 (+http://x)"`` -> ``"goodbot"``."""
    return _TOKEN_END.split(user_agent.strip().lower(), 1)[0]


def extract_path(url: str) -> str:
    """Return the path, params and query of *url*; ``/`` when it has none.

    Accepts absolute URLs, ``//host/...``, ``host/path`` without a scheme and
    bare paths. The fragment is dropped.
    """
    search_start = 2 if url.startswith("//") else 0

    early_path = _find_first_of(url, _PATH_START, search_start)
    protocol_end = url.find("://", search_start)
    if protocol_end < 0 or (0 <= early_path < protocol_end):
        protocol_end = search_start
    else:
        protocol_end += 3

    path_start = _find_first_of(url, _PATH_START, protocol_end)
    if path_start < 0:
        return "/"

    hash_pos = url.find("#", search_start)
    if 0 <= hash_pos < path_start:
        return "/"
    path_end = hash_pos if hash_pos >= 0 else len(url)
    path = url[path_start:path_end]
    if not path.startswith("/"):
        return "/" + path
    return path


def _find_first_of(text: str, chars: str, start: int) -> int:
    for index in range(start, len(text)):
        if text[index] in chars:
            return index
    return -1


def _specificity(group: Group, token: str) -> int:
    best = 0
    for name in group.user_agents:
        name_token = agent_token(name)
        if name_token and name_token != WILDCARD_AGENT and name_token in token:
            best = max(best, len(name_token))
    return best


def _names_wildcard(group: Group) -> bool:
    return any(agent_token(name) == WILDCARD_AGENT for name in group.user_agents)


def select_group_indices(groups: Sequence[Group], user_agent: str) -> List[int]:
    """Positions in *groups* of the groups that apply to *user_agent*."""
    token = agent_token(user_agent)
    if token:
        scores = [_specificity(group, token) for group in groups]
        best = max(scores, default=0)
        if best:
            return [index for index, score in enumerate(scores) if score == best]
    return [index for index, group in enumerate(groups) if _names_wildcard(group)]


def select_groups(groups: Sequence[Group], user_agent: str) -> List[Group]:
    """Groups whose rules apply to *user_agent*, in source order."""
    return [groups[index] for index in select_group_indices(groups, user_agent)]


def best_rule(rules: Iterable[PathRule], path: str) -> Optional[Tuple[int, PathRule]]:
    """Highest-precedence rule matching *path* together with its match length."""
    winner: Optional[Tuple[int, bool, int]] = None
    winning_rule: Optional[PathRule] = None
    for rule in rules:
        length = match_length(rule.pattern, path)
        if length is None:
            continue
        key = (length, rule.verdict is Verdict.ALLOW, rule.source_order)
        if winner is None or key > winner:
            winner, winning_rule = key, rule
    if winner is None or winning_rule is None:
        return None
    return winner[0], winning_rule


def resolve(report: Report, user_agent: str, path: str) -> Decision:
    groups = select_groups(report.groups, user_agent)
    if not groups:
        return Decision(allowed=True)

    agents = tuple(name for group in groups for name in group.user_agents)
    found = best_rule((rule for group in groups for rule in group.rules), path)
    if found is None:
        return Decision(allowed=True, user_agents=agents)

    length, rule = found
    # an empty Disallow matches everything with no weight
    allowed = rule.verdict is Verdict.ALLOW or length == 0
    return Decision(allowed=allowed, rule=rule, user_agents=agents)


def is_path_allowed(report: Report, user_agent: str, path: str) -> bool:
    return resolve(report, user_agent, path).allowed


def is_url_allowed(report: Report, user_agent: str, url: str) -> bool:
    """Query an already parsed report with a URL or path."""
    return is_path_allowed(report, user_agent, extract_path(url))


def crawl_delay(report: Report, user_agent: str) -> Optional[float]:
    """Last numeric Crawl-delay declared inside the groups *user_agent* selects.

    Recorded only; nothing in the resolver waits on it.
    """
    selected = set(select_group_indices(report.groups, user_agent))
    value = None
    for delay in report.crawl_delays:
        if delay.value is not None and delay.group_index in selected:
            value = delay.value
    return value


__all__ = [
    "agent_token",
    "best_rule",
    "crawl_delay",
    "extract_path",
    "is_path_allowed",
    "is_url_allowed",
    "resolve",
    "select_group_indices",
    "select_groups",
]
