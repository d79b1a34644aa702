"""Shared pytest fixtures: page fixtures and in-memory document sources."""

import os
from pathlib import Path

# Settings are read once at import time, pin them before importing src.
os.environ["ENVIRONMENT"] = "test"
os.environ["IMDB_BASE_URL"] = "http://www.imdb.com"
os.environ["LOG_TO_FILE"] = "false"

import pytest  # noqa: E402

from src.imdb.fetcher import FetchError  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeSource:
    """Serves fixed markup and records every requested URL."""

    def __init__(self, markup: str) -> None:
        self.markup = markup
        self.calls: list[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        return self.markup


class FailingSource:
    """Fails every fetch, like an unreachable site."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        raise FetchError(url, "HTTP 503")


class FlakySource(FakeSource):
    """Fails the first ``failures`` fetches, then serves markup."""

    def __init__(self, markup: str, failures: int = 1) -> None:
        super().__init__(markup)
        self.failures = failures

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        if len(self.calls) <= self.failures:
            raise FetchError(url, "timeout")
        return self.markup


def load_fixture(name: str) -> str:
    """Read an HTML fixture file."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def title_page() -> str:
    """Classic layout title page of The Shawshank Redemption."""
    return load_fixture("title_page.html")


@pytest.fixture
def search_page() -> str:
    return load_fixture("search_results.html")


@pytest.fixture
def top_250_page() -> str:
    return load_fixture("top_250.html")


@pytest.fixture
def fake_source(title_page: str) -> FakeSource:
    return FakeSource(title_page)


@pytest.fixture
def failing_source() -> FailingSource:
    return FailingSource()


@pytest.fixture
def make_source() -> type[FakeSource]:
    """FakeSource class, for tests building their own markup."""
    return FakeSource


@pytest.fixture
def make_flaky_source() -> type[FlakySource]:
    return FlakySource
