"""
Pytest fixtures and configuration for backend tests.

Provides reusable fixtures for testing API endpoints, services, and utilities.
"""
import asyncio
import os
import sys
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scholar_search.schemas.search import SearchFilters, SourceTag  # noqa: E402
from scholar_search.services.sources.base import BaseSource, Paper  # noqa: E402


class FakeRedis:
    """Minimal stand-in for the redis client calls the history store makes."""

    def __init__(self):
        self.data: Dict[str, str] = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0


class FakeSource(BaseSource):
    """Source returning canned papers, optionally after a delay or by raising."""

    def __init__(
        self,
        tag: SourceTag,
        papers: Optional[List[Paper]] = None,
        delay: float = 0.0,
        error: Optional[Exception] = None,
    ):
        super().__init__()
        self.tag = tag
        self.name = f"Fake-{tag.value}"
        self.papers = papers or []
        self.delay = delay
        self.error = error
        self.calls = []

    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        self.calls.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.papers)


class RaisingSource(FakeSource):
    """Source that breaks the never-raise contract by overriding search()."""

    async def search(self, query: str, filters: SearchFilters) -> List[Paper]:
        self.calls.append(query)
        raise RuntimeError("adapter exploded")


@pytest.fixture(scope="session", autouse=True)
def set_test_environment():
    """Set environment variables for testing."""
    os.environ["REDIS_HOST"] = "localhost"
    os.environ["REDIS_PORT"] = "6379"
    yield


@pytest.fixture
def make_paper():
    """Factory for papers with sensible defaults."""
    def _make(title: str, source: SourceTag = SourceTag.ARXIV, **overrides) -> Paper:
        fields = {
            "id": f"{source.value}_{abs(hash(title)) % 10000}",
            "title": title,
            "abstract": "An abstract about rapamycin and mTOR signalling in aging mice.",
            "authors": ("Smith, J.", "Doe, A."),
            "year": 2023,
            "journal": "Nature",
            "source": source,
            "url": "https://example.org/paper",
        }
        fields.update(overrides)
        return Paper(**fields)
    return _make


@pytest.fixture
def source_factory():
    """Build FakeSource instances; pass raising=True for a source whose search() raises."""
    def _make(tag: SourceTag, papers=None, delay: float = 0.0, error=None, raising: bool = False):
        cls = RaisingSource if raising else FakeSource
        return cls(tag, papers=papers, delay=delay, error=error)
    return _make


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def history_store(fake_redis):
    """History store backed by an in-test redis double."""
    from scholar_search.services.history import HistoryStore

    return HistoryStore(client=fake_redis, key="test:searchHistory", capacity=10)


@pytest.fixture
def fake_sources(make_paper):
    """Registry with arXiv and PubMed fakes returning one overlapping title."""
    return {
        SourceTag.PUBMED: FakeSource(SourceTag.PUBMED, [
            make_paper("Deep Learning", SourceTag.PUBMED, id="pubmed_1"),
            make_paper("Protein folding at scale", SourceTag.PUBMED, id="pubmed_2"),
        ]),
        SourceTag.ARXIV: FakeSource(SourceTag.ARXIV, [
            make_paper("deep learning ", SourceTag.ARXIV, id="arxiv_1"),
            make_paper("Transformers for genomics", SourceTag.ARXIV, id="arxiv_2"),
        ]),
        SourceTag.CORE: FakeSource(SourceTag.CORE),
        SourceTag.CROSSREF: FakeSource(SourceTag.CROSSREF),
    }


@pytest.fixture
def test_client(history_store, fake_sources):
    """Create a test client wired to fake sources and an in-memory history."""
    from scholar_search.main import app
    from scholar_search.core.dependencies import get_history_store, get_search_session
    from scholar_search.services.session import SearchSession

    app.dependency_overrides[get_history_store] = lambda: history_store
    app.dependency_overrides[get_search_session] = lambda: SearchSession(
        history_store, sources=fake_sources, timeout=None
    )

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
