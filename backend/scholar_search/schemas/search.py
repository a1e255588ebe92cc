"""
Search Schemas

Pydantic models for query construction, search filters and the
request/response bodies of the search API.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from scholar_search.core.config import settings


class SourceTag(str, Enum):
    """Literature sources a search can be fanned out to."""
    PUBMED = "pubmed"
    ARXIV = "arxiv"
    CORE = "core"
    CROSSREF = "crossref"


class BooleanOperator(str, Enum):
    """Operators joining query blocks in the advanced builder."""
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class QueryBlock(BaseModel):
    """One (operator, term) row of the advanced query builder."""
    operator: BooleanOperator = BooleanOperator.AND
    term: str = ""


class SearchMode(str, Enum):
    SIMPLE = "simple"
    ADVANCED = "advanced"


class SearchFilters(BaseModel):
    """
    Filter set shared by every adapter during one search.

    The order of `sources` is the order results are merged in.
    Year bounds are inclusive and applied to the merged list, since
    none of the source queries carry a date restriction.
    """
    sources: List[SourceTag] = Field(
        default_factory=lambda: [SourceTag(s) for s in settings.default_sources],
        description="Sources to query, in merge order"
    )
    year_min: Optional[int] = Field(default=None, description="Earliest publication year (inclusive)")
    year_max: Optional[int] = Field(default=None, description="Latest publication year (inclusive)")
    max_results: int = Field(
        default_factory=lambda: settings.default_max_results,
        ge=1,
        le=500,
        description="Maximum number of papers after merging"
    )

    @field_validator("year_min", "year_max", mode="before")
    @classmethod
    def _blank_year_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("sources")
    @classmethod
    def _drop_repeated_sources(cls, value: List[SourceTag]) -> List[SourceTag]:
        unique = []
        for tag in value:
            if tag not in unique:
                unique.append(tag)
        return unique

    @model_validator(mode="after")
    def _check_year_range(self) -> "SearchFilters":
        if self.year_min is not None and self.year_max is not None and self.year_min > self.year_max:
            raise ValueError("year_min must not be greater than year_max")
        return self


class SearchRequest(BaseModel):
    """Free-text search request."""
    query: str = Field(description="Search text entered by the user")
    filters: SearchFilters = Field(default_factory=SearchFilters)


class AdvancedSearchRequest(BaseModel):
    """Boolean query-block search request."""
    blocks: List[QueryBlock] = Field(min_length=1, description="Ordered query blocks")
    filters: SearchFilters = Field(default_factory=SearchFilters)


class PaperCard(BaseModel):
    """Display-ready fields for one paper."""
    title: str
    url: str
    source: str
    score_label: Optional[str] = None
    authors: str
    year: str
    journal: str
    abstract: str
    pdf_url: Optional[str] = None
    doi_label: Optional[str] = None


class ResultsView(BaseModel):
    """Rendered result list, distinguishing the empty state."""
    query: str
    is_empty: bool
    summary: str
    cards: List[PaperCard] = Field(default_factory=list)
