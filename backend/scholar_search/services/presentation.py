"""
Result presentation.

Turns aggregated papers into display-ready cards. Holds no search logic.
"""
import math
from typing import List

from scholar_search.schemas.search import PaperCard, ResultsView
from scholar_search.services.sources import Paper

ABSTRACT_LIMIT = 300


def _percent(score: float) -> str:
    # Halves round up, as in a browser's Math.round
    return f"{math.floor(score * 100 + 0.5)}%"


def _truncate(text: str, limit: int = ABSTRACT_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def render_paper(paper: Paper) -> PaperCard:
    authors = ", ".join(paper.authors)
    return PaperCard(
        title=paper.title,
        url=paper.url,
        source=paper.source.value,
        score_label=_percent(paper.score) if paper.score else None,
        authors=authors or "Unknown authors",
        year=str(paper.year) if paper.year else "Unknown year",
        journal=paper.journal or "Unknown journal",
        abstract=_truncate(paper.abstract or "No abstract available"),
        pdf_url=paper.pdf_url or None,
        doi_label=f"DOI: {paper.doi}" if paper.doi else None,
    )


def render_results(papers: List[Paper], query: str) -> ResultsView:
    """Build the result view, with a distinct empty state for zero papers."""
    if not papers:
        return ResultsView(
            query=query,
            is_empty=True,
            summary=f'No papers found for "{query}"',
        )

    return ResultsView(
        query=query,
        is_empty=False,
        summary=f'Found {len(papers)} papers for "{query}"',
        cards=[render_paper(p) for p in papers],
    )
