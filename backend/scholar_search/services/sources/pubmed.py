"""
PubMed data source.

PubMed provides access to 36M+ biomedical literature citations.
- No API key required
- Uses the NCBI E-utilities esearch endpoint in JSON mode

Only the esearch step is performed, so each paper carries its PMID and
placeholder metadata. Full titles, authors and abstracts would need one
efetch request per result set, which is intentionally left out.
"""
from typing import List

from scholar_search.core.config import settings
from scholar_search.core.exceptions import AdapterHTTPError, AdapterParseError
from scholar_search.schemas.search import SearchFilters, SourceTag

from .base import BaseSource, Paper, current_year


class PubMedSource(BaseSource):
    name = "PubMed"
    tag = SourceTag.PUBMED

    async def _fetch(self, query: str, filters: SearchFilters) -> List[Paper]:
        params = {
            "db": "pubmed",
            "term": query,
            "retmax": filters.max_results,
            "retmode": "json",
        }

        async with self._client() as client:
            response = await client.get(settings.pubmed_search_url, params=params)

        if response.status_code != 200:
            raise AdapterHTTPError(self.name, response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise AdapterParseError(self.name, str(e)) from e

        ids = (data.get("esearchresult") or {}).get("idlist") or []
        if not ids:
            return []

        year = current_year()
        return [
            Paper(
                id=f"pubmed_{pmid}",
                title=f"PubMed Result {pmid}",
                abstract="Abstract not available without a detail lookup",
                authors=("Author information not available",),
                year=year,
                journal="PubMed",
                source=self.tag,
                url=f"https://pubmed.ncbi.nlm.nih.gov/{pmid}/",
                doi=None,
            )
            for pmid in ids
        ]
