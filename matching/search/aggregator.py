"""
Global Search Aggregator

Scores every record of every collection against a query, merges the hits
into one ranked list and truncates it to the result budget.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from config.logging import logger
from config.settings import settings
from matching.models import SearchCategory
from matching.search.collections import (
    SearchCollection,
    contact_collection,
    deal_collection,
    page_collection,
    team_collection,
    template_collection,
)
from matching.search.pages import SITE_PAGES
from matching.search.scorer import fuzzy_score


@dataclass(frozen=True)
class SearchResult:
    """A global search hit as shown to the user."""
    id: str
    category: SearchCategory
    title: str
    subtitle: Optional[str] = None
    path: str = ""


@dataclass(frozen=True)
class ScoredResult:
    """Search hit with its ranking key. Never returned to callers."""
    result: SearchResult
    score: int


def best_field_score(query: str, fields: Iterable[str]) -> int:
    """Highest fuzzy score of the query across a record's fields."""
    return max((fuzzy_score(query, text) for text in fields), default=0)


def _score_collection(query: str, collection: SearchCollection) -> list[ScoredResult]:
    scored = []
    for record in collection.records or []:
        score = best_field_score(query, collection.fields(record))
        if score <= 0:
            continue
        projected = collection.project(record) or {}
        result = SearchResult(
            id=projected.get("id", ""),
            category=collection.category_for(record),
            title=projected.get("title", ""),
            subtitle=projected.get("subtitle"),
            path=projected.get("path", ""),
        )
        scored.append(ScoredResult(result=result, score=score))
    return scored


def search(
    query: Optional[str],
    collections: Optional[Iterable[SearchCollection]],
    limit: Optional[int] = None,
    min_query_length: Optional[int] = None,
) -> list[SearchResult]:
    """
    Rank records from several collections against a query.

    Args:
        query: Free-text search input
        collections: Collections to search (None behaves as empty)
        limit: Maximum results returned (default SEARCH_RESULT_LIMIT)
        min_query_length: Shorter trimmed queries return nothing
            (default SEARCH_MIN_QUERY_LENGTH)

    Returns:
        Results ordered by descending score; equal scores keep collection
        and record order
    """
    if limit is None:
        limit = settings.SEARCH_RESULT_LIMIT
    if min_query_length is None:
        min_query_length = settings.SEARCH_MIN_QUERY_LENGTH

    trimmed = (query or "").strip()
    if len(trimmed) < min_query_length:
        return []

    scored = []
    for collection in collections or []:
        if collection is None:
            continue
        scored.extend(_score_collection(trimmed, collection))

    # sorted() is stable with reverse=True, so ties keep encounter order
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)[:max(limit, 0)]

    logger.debug(f"Search '{trimmed}': {len(scored)} hits, returning {len(ranked)}")
    return [s.result for s in ranked]


def group_by_category(results: Iterable[SearchResult]) -> dict[SearchCategory, list[SearchResult]]:
    """Group results by category, keeping first-seen category order."""
    grouped: dict[SearchCategory, list[SearchResult]] = {}
    for result in results:
        grouped.setdefault(result.category, []).append(result)
    return grouped


class GlobalSearch:
    """
    Portal-wide search over the records the caller has loaded.

    Usage:
        global_search = GlobalSearch(contacts=contacts, deals=deals)
        for result in global_search.search("park"):
            print(result.category.value, result.title, result.path)
    """

    def __init__(
        self,
        team_members: Optional[Iterable[Any]] = None,
        contacts: Optional[Iterable[Any]] = None,
        deals: Optional[Iterable[Any]] = None,
        templates: Optional[Iterable[Any]] = None,
        pages: Optional[Iterable[Any]] = SITE_PAGES,
        limit: Optional[int] = None,
        min_query_length: Optional[int] = None,
    ):
        self.collections = [
            contact_collection(contacts),
            deal_collection(deals),
            template_collection(templates),
            team_collection(team_members),
            page_collection(pages),
        ]
        self.limit = settings.SEARCH_RESULT_LIMIT if limit is None else limit
        self.min_query_length = (
            settings.SEARCH_MIN_QUERY_LENGTH if min_query_length is None else min_query_length
        )

    def search(self, query: Optional[str], limit: Optional[int] = None) -> list[SearchResult]:
        return search(
            query,
            self.collections,
            limit=self.limit if limit is None else limit,
            min_query_length=self.min_query_length,
        )

    def search_grouped(self, query: Optional[str]) -> dict[SearchCategory, list[SearchResult]]:
        return group_by_category(self.search(query))
