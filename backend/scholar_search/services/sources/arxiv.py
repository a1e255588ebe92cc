"""
arXiv data source.

arXiv serves preprints in physics, mathematics, CS and related fields.
- No API key required
- Responses are Atom feeds, parsed with ElementTree

Entries are numbered by their position in the feed, so `arxiv_<n>` ids
and the abs/pdf links built from them are only unique within a single
response. They are not stable arXiv identifiers.
"""
from typing import List, Optional
from xml.etree import ElementTree as ET

from scholar_search.core.config import settings
from scholar_search.core.exceptions import AdapterHTTPError, AdapterParseError
from scholar_search.schemas.search import SearchFilters, SourceTag

from .base import BaseSource, Paper, current_year

ATOM_NS = "{http://www.w3.org/2005/Atom}"


def _collapse(text: Optional[str]) -> str:
    """Join all whitespace runs (including newlines) into single spaces."""
    return " ".join((text or "").split())


def _year_from_published(published: Optional[str]) -> int:
    # Atom timestamps look like 2023-01-15T18:00:00Z
    if published:
        head = published.strip()[:4]
        if head.isdigit():
            return int(head)
    return current_year()


def parse_feed(xml_text: str) -> List[Paper]:
    """
    Map an arXiv Atom feed to papers.

    Raises:
        ET.ParseError: if the body is not well-formed XML
    """
    root = ET.fromstring(xml_text)

    papers = []
    for index, entry in enumerate(root.findall(f"{ATOM_NS}entry"), start=1):
        title = _collapse(entry.findtext(f"{ATOM_NS}title")) or "No title"
        summary = _collapse(entry.findtext(f"{ATOM_NS}summary")) or "No abstract"

        authors = tuple(
            name.strip()
            for name in (
                author.findtext(f"{ATOM_NS}name") for author in entry.findall(f"{ATOM_NS}author")
            )
            if name and name.strip()
        )

        papers.append(Paper(
            id=f"arxiv_{index}",
            title=title,
            abstract=summary,
            authors=authors,
            year=_year_from_published(entry.findtext(f"{ATOM_NS}published")),
            journal="arXiv",
            source=SourceTag.ARXIV,
            url=f"https://arxiv.org/abs/{index}",
            pdf_url=f"https://arxiv.org/pdf/{index}.pdf",
            doi=None,
        ))

    return papers


class ArxivSource(BaseSource):
    name = "arXiv"
    tag = SourceTag.ARXIV

    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        params = {
            "search_query": f"all:{query}",
            "start": 0,
            "max_results": filters.max_results,
        }

        async with self._client() as client:
            response = await client.get(settings.arxiv_query_url, params=params)

        if response.status_code != 200:
            raise AdapterHTTPError(self.name, response.status_code)

        try:
            return parse_feed(response.text)
        except ET.ParseError as e:
            raise AdapterParseError(self.name, str(e)) from e
