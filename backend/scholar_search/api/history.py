"""
History API Routes

FastAPI routes for reading and saving the search history.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from scholar_search.core.dependencies import get_history_store
from scholar_search.schemas.history import HistoryEntry, SaveSearchRequest
from scholar_search.services.history import HistoryStore

router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("", response_model=List[HistoryEntry])
async def list_history(history: HistoryStore = Depends(get_history_store)):
    """
    List past searches, most recent first.
    """
    return history.load()


@router.post("", response_model=HistoryEntry)
async def save_search(request: SaveSearchRequest, history: HistoryStore = Depends(get_history_store)):
    """
    Save a search to history with the number of results currently shown.
    """
    query = request.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="No search to save")
    return history.record(query, request.results)


@router.delete("")
async def clear_history(history: HistoryStore = Depends(get_history_store)):
    """
    Remove all saved searches.
    """
    return {"cleared": history.clear()}
