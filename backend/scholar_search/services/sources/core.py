"""
CORE data source (placeholder).

CORE aggregates open access research outputs but requires an API key
from a registered account, even on the free tier. Until that is wired
in, this adapter is an explicit placeholder that returns no papers.
"""
from typing import List

from scholar_search.core.logging import get_logger
from scholar_search.schemas.search import SearchFilters, SourceTag

from .base import BaseSource, Paper

logger = get_logger(__name__)


class CoreSource(BaseSource):
    name = "CORE"
    tag = SourceTag.CORE

    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        logger.debug("CORE adapter is a placeholder (requires an API key), returning no papers")
        return []
