# File: tests/test_logger.py
import logging

from robocheck.logger import configure
from robocheck.parser.robots_parser import parse_robots_txt


def test_parser_diagnostics_go_to_log_file(tmp_path):
    log_file = tmp_path / "parse.log"
    lg = configure(level="DEBUG", log_file=log_file)
    try:
        parse_robots_txt("Disallow: /early\nUser-agent: *\nbogus\nNoindex: /x\nDisallow: nope\n")
        text = log_file.read_text(encoding="utf-8")
    finally:
        configure()

    assert lg.name == "RoboCheck"
    assert "line 1: Disallow before any User-agent discarded" in text
    assert "line 3: no field separator" in text
    assert "line 4: unknown directive 'Noindex' ignored" in text
    assert "line 5: path 'nope' never matches" in text


def test_configure_replaces_handlers():
    lg = configure(level="INFO")
    try:
        assert len(lg.handlers) == 1
        assert lg.level == logging.INFO
        assert lg.propagate is False
    finally:
        configure()
