# File: tests/conftest.py
from pathlib import Path

import pytest

from robocheck.config import ParserConfig


@pytest.fixture()
def basic_robots() -> str:
    return (
        "User-agent: *\n"
        "Disallow: /admin\n"
        "Disallow: /private\n"
        "Allow: /public\n"
    )


@pytest.fixture()
def agent_robots() -> str:
    """Specific group for Googlebot plus a deny-all wildcard group."""
    return (
        "User-agent: Googlebot\n"
        "Disallow: /search\n"
        "Allow: /\n"
        "\n"
        "User-agent: *\n"
        "Disallow: /\n"
    )


@pytest.fixture()
def wildcard_robots() -> str:
    return (
        "User-agent: *\n"
        "Disallow: /*.pdf$\n"
        "Disallow: /temp*\n"
        "Allow: /temp/public\n"
    )


@pytest.fixture()
def small_config() -> ParserConfig:
    return ParserConfig(max_document_bytes=64, max_line_length=32)


@pytest.fixture()
def robots_file(tmp_path, agent_robots) -> Path:
    """robots.txt on disk for the CLI tests."""
    path = tmp_path / "robots.txt"
    path.write_text(agent_robots, encoding="utf-8")
    return path
