"""
FastAPI Dependencies

FastAPI dependency injection for services and configuration.
Using Depends() keeps routers thin and lets tests swap in fakes.
"""
from functools import lru_cache

from fastapi import Depends

from scholar_search.core.config import Settings
from scholar_search.services.history import HistoryStore
from scholar_search.services.session import SearchSession


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings.

    Uses lru_cache to ensure settings are only loaded once.
    Can be overridden in tests using app.dependency_overrides.
    """
    return Settings()


@lru_cache()
def get_history_store() -> HistoryStore:
    """
    Get the search history store.

    Uses lru_cache to ensure only one Redis connection attempt is made.
    Can be overridden in tests to use a store backed by a mock client.
    """
    return HistoryStore()


def get_search_session(history: HistoryStore = Depends(get_history_store)) -> SearchSession:
    """
    Build a session for one request.

    Example test override:
        app.dependency_overrides[get_search_session] = lambda: SearchSession(
            history, sources={SourceTag.ARXIV: FakeSource()}
        )
    """
    return SearchSession(history)
