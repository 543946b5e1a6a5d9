"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_message() -> str:
    """Generate a large markup message (~100KB)."""
    sections = []
    for i in range(1000):
        sections.append(
            f"Line {i}: **bold {i}** and __italic__ with `code` 😀 "
            f"[link {i}](https://example.com/{i}) ~~old~~ plain text.\n"
        )
    return "".join(sections)


@pytest.fixture
def plain_message() -> str:
    """Generate a large message with no markup at all."""
    return "plain words and nothing else 😀 " * 3000
