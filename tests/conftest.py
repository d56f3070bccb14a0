"""Shared pytest fixtures for threadsmith tests."""

import re
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
THREADS_DIR = FIXTURES_DIR / "threads"

SUFFIX_PATTERN = re.compile(r" \d+/\d+$")


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_thread_fixture() -> callable:
    """Factory fixture to load thread input files.

    Usage:
        def test_something(load_thread_fixture):
            content = load_thread_fixture("essay.txt")
    """

    def _load(name: str) -> str:
        path = THREADS_DIR / name
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture
def essay_text(load_thread_fixture: callable) -> str:
    """Multi-paragraph essay with long paragraphs and an unpunctuated sentence."""
    return load_thread_fixture("essay.txt")


@pytest.fixture
def strip_suffix() -> callable:
    """Return a function that removes the " i/N" suffix from a post."""

    def _strip(post: str) -> str:
        return SUFFIX_PATTERN.sub("", post)

    return _strip


@pytest.fixture
def long_paragraph() -> str:
    """Five sentences in one paragraph, over 280 characters in total."""
    return " ".join(
        [
            "The quick brown fox jumps over the lazy dog near the river bank.",
            "Meanwhile, the cat was sleeping peacefully on the warm windowsill.",
            "Birds were singing in the trees and the sun was shining brightly.",
            "It was truly a beautiful day for everyone in the neighborhood.",
            "Children were playing in the park and laughing with joy.",
        ]
    )
