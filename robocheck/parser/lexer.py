# File: robocheck/parser/lexer.py
"""robocheck.parser.lexer: превращает логическую строку в директиву."""

from __future__ import annotations

from typing import Dict, Optional

from robocheck.models import Directive, DirectiveField

_BLANKS = " \t"

KNOWN_FIELDS: Dict[str, DirectiveField] = {
    "user-agent": DirectiveField.USER_AGENT,
    "allow": DirectiveField.ALLOW,
    "disallow": DirectiveField.DISALLOW,
    "sitemap": DirectiveField.SITEMAP,
    "crawl-delay": DirectiveField.CRAWL_DELAY,
}


def classify_field(raw_field: str) -> DirectiveField:
    """Case-insensitive lookup; anything unrecognised is UNKNOWN."""
    return KNOWN_FIELDS.get(raw_field.lower(), DirectiveField.UNKNOWN)


def lex(text: str, line_number: int = 0) -> Optional[Directive]:
    """Разделяет строку по первому двоеточию.

    Возвращает None для строки без двоеточия или с пустым именем поля.
    Значение может быть пустым (``Disallow:``).
    """
    raw_field, sep, value = text.partition(":")
    raw_field = raw_field.strip(_BLANKS)
    if not sep or not raw_field:
        return None
    return Directive(
        field=classify_field(raw_field),
        raw_field=raw_field,
        value=value.strip(_BLANKS),
        line_number=line_number,
    )


__all__ = ["KNOWN_FIELDS", "classify_field", "lex"]
