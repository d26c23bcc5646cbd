"""Pytest configuration and shared fixtures for the cursor-pager tests."""

import logging
from dataclasses import dataclass

import pytest

from cursor_pager.config import Settings


# Keep pagination debug output out of test runs
logging.getLogger("cursor_pager").setLevel(logging.WARNING)


@dataclass(frozen=True)
class Book:
    """Record type used across the page builder tests."""
    
    ID: int
    Title: str


@pytest.fixture
def all_books() -> list[Book]:
    """Seven books with IDs 1..7, ordered by ID."""
    return [Book(ID=i, Title=f"48 Laws of power -{i}") for i in range(1, 8)]


@pytest.fixture
def book_rows() -> list[dict]:
    """The same books as database rows."""
    return [{"id": i, "title": f"48 Laws of power -{i}"} for i in range(1, 8)]


@pytest.fixture
def test_settings() -> Settings:
    """Settings with small page sizes for tests."""
    return Settings(default_page_size=3, max_page_size=10, log_level="ERROR")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
