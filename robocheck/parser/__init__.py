"""robocheck.parser: scanner, lexer and group builder for robots.txt."""

from robocheck.parser.robots_parser import parse_robots_txt

__all__ = ["parse_robots_txt"]
