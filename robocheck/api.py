# File: robocheck/api.py
"""robocheck.api: the two convenience entry points used by crawlers.

Neither function raises. Missing input degrades to the permissive answer
for :func:`is_allowed` and to ``False`` for :func:`is_valid`.

Rule paths and the queried URL are compared as given. A crawler that
percent-encodes its URLs should write (or normalise) robots.txt paths the
same way.
"""
from __future__ import annotations

from typing import Optional

from robocheck.config import ParserConfig
from robocheck.matcher.resolver import is_url_allowed
from robocheck.parser.robots_parser import parse_robots_txt
from robocheck.parser.scanner import Document, decode_document


def is_allowed(
    document: Document,
    user_agent: Optional[str],
    url: Optional[str],
    config: Optional[ParserConfig] = None,
) -> bool:
    """True when *user_agent* may fetch *url* (absolute URL or path)."""
    report = parse_robots_txt(document, config)
    return is_url_allowed(report, decode_document(user_agent), decode_document(url))


def is_valid(document: Document, config: Optional[ParserConfig] = None) -> bool:
    """True for an empty document or one with at least one recognised directive."""
    if document is None:
        return False
    if not document:
        return True
    return parse_robots_txt(document, config).is_valid


__all__ = ["is_allowed", "is_valid", "parse_robots_txt"]
