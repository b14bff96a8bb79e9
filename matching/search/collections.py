"""
Searchable record collections.

A SearchCollection pairs a list of already-fetched records with two
functions: one extracting the text fields to score, one projecting a record
into the display fields of a search result. The aggregator stays generic
over record shape.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from matching.models import SearchCategory, field_value
from matching.search.pages import SITE_PAGES


@dataclass
class SearchCollection:
    """Records of one kind plus how to search and display them."""
    category: SearchCategory
    records: Optional[Iterable[Any]]
    fields: Callable[[Any], Iterable[str]]
    project: Callable[[Any], dict]
    # Per-record category, for mixed collections such as site pages
    categorize: Optional[Callable[[Any], SearchCategory]] = None

    def category_for(self, record: Any) -> SearchCategory:
        if self.categorize is None:
            return self.category
        return self.categorize(record)


def fields_of(*names: str) -> Callable[[Any], list[str]]:
    """Field extractor reading the named fields (missing fields read as "")."""
    def extract(record: Any) -> list[str]:
        return [field_value(record, name) for name in names]
    return extract


def _project_team_member(record: Any) -> dict:
    return {
        "id": field_value(record, "id"),
        "title": field_value(record, "name"),
        "subtitle": field_value(record, "title") or None,
        "path": "/portal/directory",
    }


def _project_contact(record: Any) -> dict:
    contact_id = field_value(record, "id")
    return {
        "id": contact_id,
        "title": field_value(record, "full_name"),
        "subtitle": field_value(record, "company") or field_value(record, "contact_type") or None,
        "path": f"/portal/crm/contacts/{contact_id}",
    }


def _project_deal(record: Any) -> dict:
    deal_id = field_value(record, "id")
    location = ", ".join(
        part for part in (field_value(record, "neighborhood"), field_value(record, "borough")) if part
    )
    return {
        "id": deal_id,
        "title": field_value(record, "property_address"),
        "subtitle": location or None,
        "path": f"/portal/crm/deals/{deal_id}",
    }


def _project_template(record: Any) -> dict:
    division = field_value(record, "division")
    return {
        "id": field_value(record, "id"),
        "title": field_value(record, "name"),
        "subtitle": division or None,
        "path": f"/portal/templates/{division}" if division else "/portal/templates",
    }


def _project_page(record: Any) -> dict:
    return {
        "id": field_value(record, "id"),
        "title": field_value(record, "title"),
        "subtitle": field_value(record, "description") or None,
        "path": field_value(record, "path"),
    }


def _page_category(record: Any) -> SearchCategory:
    category = field_value(record, "category")
    try:
        return SearchCategory(category)
    except ValueError:
        return SearchCategory.PAGE


def team_collection(members: Optional[Iterable[Any]]) -> SearchCollection:
    return SearchCollection(
        category=SearchCategory.TEAM,
        records=members,
        fields=fields_of("name", "title", "email"),
        project=_project_team_member,
    )


def contact_collection(contacts: Optional[Iterable[Any]]) -> SearchCollection:
    return SearchCollection(
        category=SearchCategory.CONTACT,
        records=contacts,
        fields=fields_of("full_name", "company", "email"),
        project=_project_contact,
    )


def deal_collection(deals: Optional[Iterable[Any]]) -> SearchCollection:
    return SearchCollection(
        category=SearchCategory.DEAL,
        records=deals,
        fields=fields_of("property_address", "neighborhood", "borough"),
        project=_project_deal,
    )


def template_collection(templates: Optional[Iterable[Any]]) -> SearchCollection:
    return SearchCollection(
        category=SearchCategory.TEMPLATE,
        records=templates,
        fields=fields_of("name", "division", "description"),
        project=_project_template,
    )


def page_collection(pages: Optional[Iterable[Any]] = SITE_PAGES) -> SearchCollection:
    """Site pages; each result keeps the page's own category."""
    return SearchCollection(
        category=SearchCategory.PAGE,
        records=pages,
        fields=fields_of("title", "description"),
        project=_project_page,
        categorize=_page_category,
    )
