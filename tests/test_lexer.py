# File: tests/test_lexer.py
import pytest

from robocheck.models import DirectiveField
from robocheck.parser.lexer import lex


@pytest.mark.parametrize(
    "line,field,value",
    [
        ("User-agent: *", DirectiveField.USER_AGENT, "*"),
        ("USER-AGENT:GoogleBot", DirectiveField.USER_AGENT, "GoogleBot"),
        ("allow: /public", DirectiveField.ALLOW, "/public"),
        ("Disallow:", DirectiveField.DISALLOW, ""),
        ("Sitemap: https://example.com/sitemap.xml", DirectiveField.SITEMAP, "https://example.com/sitemap.xml"),
        ("Crawl-Delay : 10", DirectiveField.CRAWL_DELAY, "10"),
        ("Invalid-directive: some-value", DirectiveField.UNKNOWN, "some-value"),
    ],
)
def test_lex_known_and_unknown_fields(line, field, value):
    directive = lex(line, 4)
    assert directive.field is field
    assert directive.value == value
    assert directive.line_number == 4


def test_value_keeps_everything_after_first_colon():
    directive = lex("Sitemap: http://example.com:8080/s.xml")
    assert directive.value == "http://example.com:8080/s.xml"


def test_raw_field_spelling_is_kept():
    assert lex("DisAllow: /x").raw_field == "DisAllow"


@pytest.mark.parametrize("line", ["Disallow /admin", ": /admin", "  :", "just text"])
def test_malformed_lines(line):
    assert lex(line) is None
