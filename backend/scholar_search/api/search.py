"""
Search API Routes

FastAPI routes binding the search core to HTTP requests.
"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from scholar_search.core.exceptions import AggregationFailure, EmptyQueryError, ExportError
from scholar_search.core.logging import get_logger
from scholar_search.core.dependencies import get_search_session
from scholar_search.schemas.search import AdvancedSearchRequest, SearchRequest
from scholar_search.schemas.results import ExportRequest, SearchResponse
from scholar_search.services.demo import DEMO_QUERY, demo_papers
from scholar_search.services.export import export_filename, papers_to_csv
from scholar_search.services.presentation import render_results
from scholar_search.services.session import SearchSession

logger = get_logger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])

SEARCH_FAILED_MESSAGE = "Search failed. Please try again."


def _build_response(session: SearchSession, papers) -> SearchResponse:
    return SearchResponse(
        query=session.last_query,
        total=len(papers),
        papers=papers,
        view=render_results(papers, session.last_query),
    )


@router.post("", response_model=SearchResponse)
async def search(request: SearchRequest, session: SearchSession = Depends(get_search_session)):
    """
    Search the selected sources with a free-text query.
    """
    try:
        papers = await session.search_simple(request.query, request.filters)
    except EmptyQueryError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except AggregationFailure as e:
        logger.error(f"Search error: {e}")
        raise HTTPException(status_code=500, detail=SEARCH_FAILED_MESSAGE)

    return _build_response(session, papers)


@router.post("/advanced", response_model=SearchResponse)
async def search_advanced(
    request: AdvancedSearchRequest,
    session: SearchSession = Depends(get_search_session)
):
    """
    Search the selected sources with a boolean query built from blocks.
    """
    try:
        papers = await session.search_advanced(request.blocks, request.filters)
    except EmptyQueryError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except AggregationFailure as e:
        logger.error(f"Search error: {e}")
        raise HTTPException(status_code=500, detail=SEARCH_FAILED_MESSAGE)

    return _build_response(session, papers)


@router.get("/demo", response_model=SearchResponse)
async def search_demo():
    """
    Return a fixed demo result set without contacting any source.
    """
    papers = demo_papers()
    return SearchResponse(
        query=DEMO_QUERY,
        total=len(papers),
        papers=papers,
        view=render_results(papers, DEMO_QUERY),
    )


@router.post("/export")
async def export_csv(request: ExportRequest):
    """
    Export the given papers as a CSV download.
    """
    try:
        content = papers_to_csv(request.papers)
    except ExportError as e:
        raise HTTPException(status_code=400, detail=e.message)

    filename = export_filename()
    return Response(
        content=content,
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        }
    )
