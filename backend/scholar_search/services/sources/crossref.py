"""
CrossRef data source (placeholder).

CrossRef provides DOI metadata for 140M+ works. The polite-pool
registration it expects is not set up here, so this adapter is an
explicit placeholder that always returns no papers.
"""
from typing import List

from scholar_search.core.logging import get_logger
from scholar_search.schemas.search import SearchFilters, SourceTag

from .base import BaseSource, Paper

logger = get_logger(__name__)


class CrossrefSource(BaseSource):
    name = "CrossRef"
    tag = SourceTag.CROSSREF

    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        logger.debug("CrossRef adapter is a placeholder (requires registration), returning no papers")
        return []
