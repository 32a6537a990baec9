# File: robocheck/parser/scanner.py
"""robocheck.parser.scanner: разбиение текста robots.txt на логические строки."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

from robocheck.config import DEFAULT_CONFIG, ParserConfig
from robocheck.logger import logger

_EOL = re.compile(r"\r\n|\r|\n")
_BLANKS = " \t"
_BOM = "\ufeff"

Document = Union[str, bytes, bytearray, None]


@dataclass(frozen=True, slots=True)
class ScannedLine:
    """Non-empty line with the comment and surrounding blanks removed."""

    number: int
    text: str


def decode_document(document: Document) -> str:
    """Приводит вход к str; байты декодируются как UTF-8 с заменой битых последовательностей."""
    if document is None:
        return ""
    if isinstance(document, (bytes, bytearray)):
        return bytes(document).decode("utf-8", errors="replace")
    return str(document)


def apply_byte_budget(text: str, max_bytes: int) -> tuple[str, bool]:
    """Cut *text* to the whole lines that fit in *max_bytes* UTF-8 bytes.

    A line crossing the budget is dropped entirely. Returns (text, truncated).
    """
    if len(text) * 4 <= max_bytes:
        return text, False
    encoded = text.encode("utf-8", errors="surrogatepass")
    if len(encoded) <= max_bytes:
        return text, False
    kept = encoded[:max_bytes]
    if encoded[max_bytes:max_bytes + 1] not in (b"\n", b"\r"):
        last_break = max(kept.rfind(b"\n"), kept.rfind(b"\r"))
        kept = kept[:last_break + 1]
    return kept.decode("utf-8", errors="ignore"), True


def _physical_lines(text: str) -> Iterator[str]:
    start = 0
    for match in _EOL.finditer(text):
        yield text[start:match.start()]
        start = match.end()
    if start < len(text):
        yield text[start:]


def scan_lines(text: str, config: ParserConfig = DEFAULT_CONFIG) -> Iterator[ScannedLine]:
    """Лениво выдаёт непустые логические строки документа.

    Комментарий начинается с первого ``#``; пробелы и табы по краям срезаются.
    Строки длиннее ``config.max_line_length`` укорачиваются.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]

    limit = config.max_line_length
    for number, raw in enumerate(_physical_lines(text), start=1):
        if len(raw) > limit:
            logger.debug("line %d: cut from %d to %d characters", number, len(raw), limit)
            raw = raw[:limit]
        line = raw.split("#", 1)[0].strip(_BLANKS)
        if line:
            yield ScannedLine(number=number, text=line)


__all__ = ["ScannedLine", "Document", "decode_document", "apply_byte_budget", "scan_lines"]
