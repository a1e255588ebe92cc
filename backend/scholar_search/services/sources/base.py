"""
Base types and interfaces for data sources.

This module defines the standard paper format and abstract base class
that all data sources should implement for consistency.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field

from scholar_search.core.config import settings
from scholar_search.core.logging import get_logger
from scholar_search.schemas.search import SearchFilters, SourceTag

logger = get_logger(__name__)


def current_year() -> int:
    return date.today().year


class Paper(BaseModel):
    """
    Standard paper format used across all sources.

    Papers are frozen once built. The title doubles as the
    deduplication key when results from several sources are merged.
    """
    model_config = ConfigDict(frozen=True)

    id: str  # Source-prefixed, e.g. "pubmed_123"
    title: str
    abstract: str = "No abstract available"
    authors: Tuple[str, ...] = ()
    year: int = Field(default_factory=current_year)
    journal: str = ""
    source: SourceTag
    url: str
    pdf_url: Optional[str] = None
    doi: Optional[str] = None

    # Relevance as reported by the source, if any
    score: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @property
    def dedup_key(self) -> str:
        return self.title.lower().strip()


class BaseSource(ABC):
    """
    Abstract base class for all data sources.

    Subclasses implement `_fetch`, which may raise freely. `search` is the
    public entry point and never raises: any failure inside one source is
    logged and turned into an empty result so other sources are unaffected.

    To add a new source:
    1. Create a class that inherits from BaseSource
    2. Implement the name/tag properties and _fetch
    3. Register it in default_sources() in the sources __init__.py

    Example:
        class NewSource(BaseSource):
            name = "NewSource"
            tag = SourceTag.CORE

            async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
                ...
    """

    name: str = ""
    tag: SourceTag

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        # Injectable for tests (httpx.MockTransport)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            transport=self._transport,
            headers={
                "User-Agent": f"ScholarSearch/1.0 (mailto:{settings.API_CONTACT_EMAIL})"
            },
        )

    async def search(self, query: str, filters: SearchFilters) -> List[Paper]:
        """
        Search this source for papers matching the query.

        Args:
            query: Search query string
            filters: Filter set for the current search (max_results is used)

        Returns:
            List of Paper objects, empty if the source failed
        """
        logger.debug(f"Searching {self.name}: {query[:50]}")
        try:
            papers = await self._fetch(query, filters)
        except httpx.TimeoutException:
            logger.warning(f"{self.name} timeout")
            return []
        except Exception as e:
            logger.warning(f"{self.name} error: {e}")
            return []

        logger.debug(f"{self.name}: {len(papers)} papers")
        return papers

    @abstractmethod
    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        """Perform the request and map the response. May raise."""
        pass
