"""
Global Search Module

Fuzzy ranking of contacts, deals, templates, team members and site pages
for the portal's unified search box.
"""

from matching.search.aggregator import (
    GlobalSearch,
    SearchResult,
    group_by_category,
    search,
)
from matching.search.collections import (
    SearchCollection,
    contact_collection,
    deal_collection,
    fields_of,
    page_collection,
    team_collection,
    template_collection,
)
from matching.search.pages import SITE_PAGES
from matching.search.scorer import fuzzy_score

__all__ = [
    "GlobalSearch",
    "SITE_PAGES",
    "SearchCollection",
    "SearchResult",
    "contact_collection",
    "deal_collection",
    "fields_of",
    "fuzzy_score",
    "group_by_category",
    "page_collection",
    "search",
    "team_collection",
    "template_collection",
]
