"""
Schemas Module

Contains all Pydantic models (DTOs) for:
- Search filters and query blocks
- API request/response validation
- Persisted search history
"""
from .search import (
    SourceTag,
    BooleanOperator,
    QueryBlock,
    SearchMode,
    SearchFilters,
    SearchRequest,
    AdvancedSearchRequest,
    PaperCard,
    ResultsView,
)
from .history import HistoryEntry, SaveSearchRequest

__all__ = [
    "SourceTag",
    "BooleanOperator",
    "QueryBlock",
    "SearchMode",
    "SearchFilters",
    "SearchRequest",
    "AdvancedSearchRequest",
    "PaperCard",
    "ResultsView",
    "HistoryEntry",
    "SaveSearchRequest",
]
