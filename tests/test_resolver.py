# File: tests/test_resolver.py
"""Group selection, rule precedence and URL path extraction."""
import pytest

from robocheck.matcher.resolver import agent_token, extract_path, is_path_allowed, resolve, select_groups
from robocheck.models import Verdict
from robocheck.parser.robots_parser import parse_robots_txt


@pytest.mark.parametrize(
    "user_agent,token",
    [
        ("GoodBot/1.0", "goodbot"),
        ("Googlebot-News", "googlebot-news"),
        ("MyBot extra words", "mybot"),
        ("  SpacedBot  ", "spacedbot"),
        ("*", "*"),
        ("", ""),
        ("/1.0", ""),
    ],
)
def test_agent_token(user_agent, token):
    assert agent_token(user_agent) == token


@pytest.mark.parametrize(
    "url,path",
    [
        ("https://example.com/admin?param=value", "/admin?param=value"),
        ("https://example.com/admin#section", "/admin"),
        ("https://example.com:8080/admin", "/admin"),
        ("/admin", "/admin"),
        ("example.com/admin", "/admin"),
        ("//example.com/admin", "/admin"),
        ("https://example.com//admin//", "//admin//"),
        ("https://example.com", "/"),
        ("https://example.com?q=1", "/?q=1"),
        ("https://example.com#/admin", "/"),
        ("https://example.com/a;b", "/a;b"),
        ("", "/"),
        ("https://example.com/admin with spaces", "/admin with spaces"),
    ],
)
def test_extract_path(url, path):
    assert extract_path(url) == path


def test_longest_match_wins():
    report = parse_robots_txt("User-agent: *\nDisallow: /foo\nAllow: /foo/bar")
    assert is_path_allowed(report, "x", "/foo/bar/baz")
    assert not is_path_allowed(report, "x", "/foo/qux")


def test_allow_wins_tie_on_equal_length():
    report = parse_robots_txt("User-agent: *\nDisallow: /page\nAllow: /page\n")
    decision = resolve(report, "x", "/page")
    assert decision.allowed
    assert decision.rule.verdict is Verdict.ALLOW


def test_allow_wins_tie_regardless_of_order():
    report = parse_robots_txt("User-agent: *\nAllow: /p*\nDisallow: /p$\n")
    assert is_path_allowed(report, "x", "/p")


def test_later_rule_wins_exact_duplicate():
    report = parse_robots_txt("User-agent: *\nDisallow: /a\nDisallow: /a\n")
    assert resolve(report, "x", "/a").rule.line_number == 3


def test_wildcard_length_counts_raw_text():
    report = parse_robots_txt("User-agent: *\nAllow: /a\nDisallow: /*b\n")
    # "/*b" is longer than "/a" even though it consumes less of the path
    assert not is_path_allowed(report, "x", "/ab")


def test_empty_disallow_allows_everything():
    report = parse_robots_txt("User-agent: *\nDisallow:")
    decision = resolve(report, "x", "/anything")
    assert decision.allowed
    assert decision.rule is not None


def test_empty_disallow_does_not_override_other_rules():
    report = parse_robots_txt("User-agent: *\nDisallow:\nDisallow: /x\n")
    assert not is_path_allowed(report, "x", "/x")


def test_specific_group_beats_wildcard():
    report = parse_robots_txt("User-agent: *\nDisallow: /\nUser-agent: GoodBot\nAllow: /")
    assert is_path_allowed(report, "GoodBot/1.0", "/path")
    assert not is_path_allowed(report, "OtherBot", "/path")


def test_longest_agent_name_wins():
    report = parse_robots_txt(
        "User-agent: googlebot\nDisallow: /\n\nUser-agent: googlebot-news\nAllow: /\n"
    )
    assert is_path_allowed(report, "Googlebot-News", "/x")
    assert not is_path_allowed(report, "Googlebot", "/x")


def test_group_names_are_reduced_to_product_token():
    report = parse_robots_txt("User-agent: GoodBot/2.1\nDisallow: /\n")
    assert not is_path_allowed(report, "goodbot", "/x")


def test_groups_for_the_same_agent_merge():
    text = "User-agent: *\nDisallow: /admin\nInvalid-directive: x\nUser-agent: *\nDisallow: /private\n"
    report = parse_robots_txt(text)
    assert len(select_groups(report.groups, "MyBot")) == 2
    assert not is_path_allowed(report, "MyBot", "/admin")
    assert not is_path_allowed(report, "MyBot", "/private")


def test_specific_group_without_rules_allows_everything():
    report = parse_robots_txt("User-agent: *\nDisallow: /\nUser-agent: quiet\n")
    assert is_path_allowed(report, "quiet", "/x")


def test_no_groups_means_allowed():
    report = parse_robots_txt("Sitemap: https://example.com/sitemap.xml")
    assert is_path_allowed(report, "AnyBot", "/any/path")
    assert resolve(report, "AnyBot", "/").user_agents == ()


def test_no_matching_group_and_no_wildcard_means_allowed():
    report = parse_robots_txt("User-agent: special\nDisallow: /\n")
    assert is_path_allowed(report, "OtherBot", "/")


def test_empty_user_agent_uses_wildcard_group():
    report = parse_robots_txt("User-agent: *\nDisallow: /\nUser-agent:\nAllow: /\n")
    assert not is_path_allowed(report, "", "/x")


def test_invalid_pattern_never_matches():
    report = parse_robots_txt("User-agent: *\nDisallow: admin\n")
    assert is_path_allowed(report, "x", "admin")
    assert is_path_allowed(report, "x", "/admin")


def test_decision_reports_selected_agents():
    report = parse_robots_txt("User-agent: A\nUser-agent: B\nDisallow: /x\n")
    decision = resolve(report, "b", "/x")
    assert not decision.allowed
    assert decision.user_agents == ("A", "B")
