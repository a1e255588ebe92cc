"""
History Schemas

Pydantic models for the persisted search history.
"""
from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    """One past search as stored in the history list."""
    id: int = Field(description="Creation time in milliseconds, unique within the store")
    query: str
    timestamp: str = Field(description="ISO-8601 creation time")
    results: int = Field(ge=0, description="Number of papers the search returned")


class SaveSearchRequest(BaseModel):
    """Explicitly save a search with the number of results currently shown."""
    query: str
    results: int = Field(default=0, ge=0)
