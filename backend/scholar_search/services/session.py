"""
Search session context.

Holds the state a search UI keeps between actions (current mode, last
query, papers on screen) and ties the query builder, the aggregator and
the history store together. The core functions it calls stay stateless.
"""
from typing import List, Mapping, Optional, Sequence

from scholar_search.core.exceptions import EmptyQueryError
from scholar_search.core.logging import get_logger
from scholar_search.schemas.history import HistoryEntry
from scholar_search.schemas.search import QueryBlock, SearchFilters, SearchMode, SourceTag
from scholar_search.services.aggregator import SETTINGS_TIMEOUT, aggregate
from scholar_search.services.history import HistoryStore
from scholar_search.services.query_builder import build_advanced_query, build_simple_query
from scholar_search.services.sources import BaseSource, Paper

logger = get_logger(__name__)


class SearchSession:
    """Per-user search state owned by the calling UI layer."""

    def __init__(
        self,
        history: HistoryStore,
        sources: Optional[Mapping[SourceTag, BaseSource]] = None,
        timeout=SETTINGS_TIMEOUT
    ):
        self.history = history
        self.sources = sources
        self.timeout = timeout
        self.mode = SearchMode.SIMPLE
        self.last_query: Optional[str] = None
        self.last_results: List[Paper] = []

    async def search_simple(self, text: str, filters: SearchFilters) -> List[Paper]:
        query = build_simple_query(text)
        self.mode = SearchMode.SIMPLE
        return await self.execute(query, filters)

    async def search_advanced(self, blocks: Sequence[QueryBlock], filters: SearchFilters) -> List[Paper]:
        query = build_advanced_query(blocks)
        self.mode = SearchMode.ADVANCED
        return await self.execute(query, filters)

    async def execute(self, query: str, filters: SearchFilters) -> List[Paper]:
        """Run a built query, remember the results and log it to history."""
        papers = await aggregate(query, filters, sources=self.sources, timeout=self.timeout)

        self.last_query = query
        self.last_results = papers
        self.history.record(query, len(papers))

        logger.info(f"Search '{query[:50]}' returned {len(papers)} papers")
        return papers

    def save_current(self) -> HistoryEntry:
        """Save the last query with the number of papers currently held."""
        if not self.last_query:
            raise EmptyQueryError("No search to save")
        return self.history.record(self.last_query, len(self.last_results))
