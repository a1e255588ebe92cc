"""
Data sources for academic paper search.

Each source is implemented in its own module for maintainability.
All sources share the BaseSource contract: an async search() that
never raises and returns normalized Paper records.

To add a new source:
1. Create a new file (e.g., new_source.py) with a BaseSource subclass
2. Export it here
3. Add it to default_sources()
"""
from typing import Dict

from scholar_search.schemas.search import SourceTag

from .base import BaseSource, Paper
from .pubmed import PubMedSource
from .arxiv import ArxivSource
from .core import CoreSource
from .crossref import CrossrefSource


def default_sources() -> Dict[SourceTag, BaseSource]:
    """Fresh adapter instances for every supported source, keyed by tag."""
    return {
        SourceTag.PUBMED: PubMedSource(),
        SourceTag.ARXIV: ArxivSource(),
        SourceTag.CORE: CoreSource(),
        SourceTag.CROSSREF: CrossrefSource(),
    }


__all__ = [
    "BaseSource",
    "Paper",
    "PubMedSource",
    "ArxivSource",
    "CoreSource",
    "CrossrefSource",
    "default_sources",
]
