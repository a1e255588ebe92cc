"""
Query construction for simple and advanced (boolean block) searches.
"""
from typing import Iterable

from scholar_search.core.exceptions import EmptyQueryError
from scholar_search.schemas.search import QueryBlock


def build_simple_query(text: str) -> str:
    """Return the trimmed free-text query, rejecting blank input."""
    query = (text or "").strip()
    if not query:
        raise EmptyQueryError("Please enter a search query")
    return query


def build_advanced_query(blocks: Iterable[QueryBlock]) -> str:
    """
    Join query blocks into one boolean query string.

    The first block with a term contributes the bare term; every later
    block with a term contributes " <OPERATOR> <term>". Blocks with an
    empty term are skipped together with their operator. Operators are
    concatenated as given, with no check of boolean well-formedness.

    Example:
        [(AND, "cats"), (OR, ""), (NOT, "dogs")] -> "cats NOT dogs"
    """
    parts = []
    for block in blocks:
        term = (block.term or "").strip()
        if not term:
            continue
        if parts:
            parts.append(f" {block.operator.value} {term}")
        else:
            parts.append(term)

    if not parts:
        raise EmptyQueryError("Please enter at least one search term")
    return "".join(parts)
