"""
CSV Export Service

Writes the current result list as a CSV document. Commas inside a field
are replaced with semicolons so spreadsheet tools that split naively on
commas still see six columns.
"""
import csv
import io
from datetime import date
from typing import List, Optional

from scholar_search.core.exceptions import ExportError
from scholar_search.services.sources import Paper

CSV_HEADER = ["Title", "Authors", "Year", "Journal", "Source", "URL"]


def _clean(value) -> str:
    return str(value).replace(",", ";")


def papers_to_csv(papers: List[Paper]) -> str:
    """
    Serialize papers to CSV text with a Title,Authors,Year,Journal,Source,URL header.

    Raises:
        ExportError: if there are no papers to export
    """
    if not papers:
        raise ExportError("No results to export")

    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADER) + "\n")

    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for paper in papers:
        writer.writerow([
            _clean(paper.title),
            _clean(", ".join(paper.authors)),
            _clean(paper.year),
            _clean(paper.journal),
            _clean(paper.source.value),
            _clean(paper.url),
        ])

    return buffer.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    """Download filename stamped with the date, e.g. academic-search-results-2024-01-15.csv."""
    today = today or date.today()
    return f"academic-search-results-{today.isoformat()}.csv"
