"""
Multi-source search aggregation.

Orchestrates one search across the selected sources:
1. Parallel fan-out to every selected adapter
2. Merge in source order (never in response order)
3. Year filtering
4. Title deduplication
5. Truncation to max_results
"""
import asyncio
import time
from typing import Dict, List, Mapping, Optional

from scholar_search.core.config import settings
from scholar_search.core.exceptions import AggregationFailure
from scholar_search.core.logging import get_logger
from scholar_search.schemas.search import SearchFilters, SourceTag
from scholar_search.services.sources import BaseSource, Paper, default_sources

logger = get_logger(__name__)

# Sentinel so callers can pass timeout=None to wait indefinitely
SETTINGS_TIMEOUT = object()


def deduplicate_papers(papers: List[Paper]) -> List[Paper]:
    """
    Remove papers whose lowercased, trimmed title was already seen.

    The first occurrence wins, so earlier sources take precedence
    over later ones regardless of which source the duplicate came from.
    """
    seen_titles = set()
    unique_papers = []

    for paper in papers:
        title_key = paper.dedup_key
        if title_key in seen_titles:
            continue
        seen_titles.add(title_key)
        unique_papers.append(paper)

    return unique_papers


def filter_by_year(
    papers: List[Paper],
    year_min: Optional[int] = None,
    year_max: Optional[int] = None
) -> List[Paper]:
    """Keep papers published within [year_min, year_max]; unset bounds are open."""
    if year_min is None and year_max is None:
        return papers
    return [
        p for p in papers
        if (year_min is None or p.year >= year_min)
        and (year_max is None or p.year <= year_max)
    ]


async def _run_source(
    source: BaseSource,
    query: str,
    filters: SearchFilters,
    timeout: Optional[float]
) -> List[Paper]:
    if timeout is None:
        return await source.search(query, filters)
    return await asyncio.wait_for(source.search(query, filters), timeout=timeout)


async def aggregate(
    query: str,
    filters: SearchFilters,
    sources: Optional[Mapping[SourceTag, BaseSource]] = None,
    timeout=SETTINGS_TIMEOUT
) -> List[Paper]:
    """
    Search every source selected in the filters and merge the results.

    Args:
        query: Query string, already built and validated
        filters: Source selection, year bounds and result cap
        sources: Adapter registry (defaults to all built-in sources)
        timeout: Per-source time limit in seconds; None waits indefinitely.
            Defaults to settings.SOURCE_TIMEOUT_SECONDS.

    Returns:
        Deduplicated papers, at most filters.max_results, in source order

    Raises:
        AggregationFailure: if merging the collected results fails
    """
    registry: Dict[SourceTag, BaseSource] = dict(sources) if sources is not None else default_sources()
    if timeout is SETTINGS_TIMEOUT:
        timeout = settings.SOURCE_TIMEOUT_SECONDS

    selected = [(tag, registry[tag]) for tag in filters.sources if tag in registry]
    if not selected:
        logger.info("No sources selected, skipping search")
        return []

    logger.info(f"SEARCHING {', '.join(tag.value for tag, _ in selected)}: {query[:80]}")
    start_time = time.time()

    # Run all searches in parallel
    results = await asyncio.gather(
        *(_run_source(source, query, filters, timeout) for _, source in selected),
        return_exceptions=True
    )

    elapsed = time.time() - start_time

    try:
        all_papers: List[Paper] = []
        for (tag, source), result in zip(selected, results):
            if isinstance(result, asyncio.TimeoutError):
                logger.warning(f"{source.name} did not respond within {timeout}s")
            elif isinstance(result, BaseException):
                logger.warning(f"{source.name} failed: {result!r}")
            else:
                logger.debug(f"{source.name}: {len(result)} papers")
                all_papers.extend(result)

        logger.info(f"TOTAL CANDIDATES: {len(all_papers)} (fetched in {elapsed:.1f}s)")

        in_range = filter_by_year(all_papers, filters.year_min, filters.year_max)
        unique_papers = deduplicate_papers(in_range)
        logger.info(f"AFTER DEDUP: {len(unique_papers)}")

        return unique_papers[:filters.max_results]
    except Exception as e:
        logger.error(f"Merging search results failed: {e}")
        raise AggregationFailure(str(e)) from e


def run_aggregate(
    query: str,
    filters: SearchFilters,
    sources: Optional[Mapping[SourceTag, BaseSource]] = None,
    timeout=SETTINGS_TIMEOUT
) -> List[Paper]:
    """
    Sync wrapper to run aggregate() from code without an event loop.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(aggregate(query, filters, sources=sources, timeout=timeout))
