# robocheck/__init__.py
"""
robocheck package initializer.
Defines package version and exposes the public API and CLI.
"""
__version__ = "0.1.0"

from robocheck.api import is_allowed, is_valid
from robocheck.config import ParserConfig, load_config
from robocheck.matcher.resolver import crawl_delay, is_url_allowed
from robocheck.models import Decision, Group, PathRule, Report, Verdict
from robocheck.parser.robots_parser import parse_robots_txt
from .cli import cli  # console script entry point

__all__ = [
    "__version__",
    "cli",
    "crawl_delay",
    "is_url_allowed",
    "is_allowed",
    "is_valid",
    "parse_robots_txt",
    "Decision",
    "Group",
    "ParserConfig",
    "PathRule",
    "Report",
    "Verdict",
    "load_config",
]
