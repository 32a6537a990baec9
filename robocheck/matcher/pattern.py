# File: robocheck/matcher/pattern.py
"""robocheck.matcher.pattern: compilation and matching of Allow/Disallow paths.

A rule value is split on ``*`` into literal segments. A trailing ``$`` anchors
the last segment to the end of the path; a ``$`` anywhere else is an ordinary
character. Without the anchor a pattern is a prefix match.

Matching is case-sensitive and works on the text exactly as given: neither
the pattern nor the path is percent-decoded here, so callers must hand both in
the same form.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

WILDCARD = "*"
END_ANCHOR = "$"

_VALID_STARTS = ("/", WILDCARD)


class TokenKind(str, Enum):
    LITERAL = "literal"
    WILDCARD = "wildcard"
    END = "end"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Immutable form of one rule path.

    ``segments`` holds the literal text between wildcards, so ``/a*b*`` becomes
    ``("/a", "b", "")``. ``valid`` is False for values that cannot match any
    path (no leading ``/`` or ``*``).
    """

    raw: str
    segments: Tuple[str, ...]
    anchored: bool
    valid: bool

    @property
    def length(self) -> int:
        """Precedence weight: length of the raw pattern text."""
        return len(self.raw)

    @property
    def tokens(self) -> Tuple[Tuple[TokenKind, str], ...]:
        """The pattern as an ordered literal / ``*`` / ``$`` token sequence."""
        out = []
        for index, segment in enumerate(self.segments):
            if index:
                out.append((TokenKind.WILDCARD, WILDCARD))
            if segment:
                out.append((TokenKind.LITERAL, segment))
        if self.anchored:
            out.append((TokenKind.END, END_ANCHOR))
        return tuple(out)


def compile_pattern(value: str) -> CompiledPattern:
    """Compile a raw Allow/Disallow value."""
    if not value:
        # matches every path with zero weight
        return CompiledPattern(raw="", segments=("",), anchored=False, valid=True)

    valid = value.startswith(_VALID_STARTS)
    anchored = value.endswith(END_ANCHOR)
    body = value[:-1] if anchored else value
    return CompiledPattern(
        raw=value,
        segments=tuple(body.split(WILDCARD)),
        anchored=anchored,
        valid=valid,
    )


def _segments_match(segments: Tuple[str, ...], anchored: bool, path: str) -> bool:
    first = segments[0]
    if not path.startswith(first):
        return False
    if len(segments) == 1:
        return not anchored or len(path) == len(first)

    pos = len(first)
    middle, last = segments[1:-1], segments[-1]
    for segment in middle:
        found = path.find(segment, pos)
        if found < 0:
            return False
        pos = found + len(segment)

    if anchored:
        # the last segment must sit at the very end without overlapping
        return len(path) - len(last) >= pos and path.endswith(last)
    return path.find(last, pos) >= 0


def match_length(pattern: CompiledPattern, path: str) -> Optional[int]:
    """Return the precedence weight if *pattern* matches *path*, else None."""
    if not pattern.valid:
        return None
    if not _segments_match(pattern.segments, pattern.anchored, path):
        return None
    return pattern.length


def matches(pattern: CompiledPattern, path: str) -> bool:
    return match_length(pattern, path) is not None


__all__ = ["CompiledPattern", "TokenKind", "compile_pattern", "match_length", "matches"]
