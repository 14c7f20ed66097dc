"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todo_parser.config import Config  # noqa: E402


SPRINT_SOURCE = """
// Sprint planning
project "Sprint" {
    todo: "Design", @high, due: 2025-11-15, assign: @designer, @tag: "frontend",
    todo: "Auth", @high, due: 2025-11-20, depends_on: "DB", @tag: "backend",
    done: "DB", @medium, assign: @dev,
}
"""


@pytest.fixture
def sprint_source():
    return SPRINT_SOURCE


@pytest.fixture
def sprint_file(tmp_path):
    path = tmp_path / "sprint.todo"
    path.write_text(SPRINT_SOURCE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_config():
    """Keep the cached configuration from leaking between tests."""
    Config.reset()
    yield
    Config.reset()
