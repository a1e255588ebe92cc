"""
Result Schemas

Response bodies carrying aggregated papers, and the export request.
"""
from typing import List

from pydantic import BaseModel, Field

from scholar_search.schemas.search import ResultsView
from scholar_search.services.sources.base import Paper


class SearchResponse(BaseModel):
    """Papers returned by one search together with their rendered view."""
    query: str
    total: int
    papers: List[Paper]
    view: ResultsView


class ExportRequest(BaseModel):
    """Papers currently shown to the user, to be written as CSV."""
    papers: List[Paper] = Field(default_factory=list)
