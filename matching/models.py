"""
Brokerage Matching Core - Record Models

Plain record types for the data the portal already fetched. The matching and
search code also accepts raw database rows (dicts), so every field read goes
through field_value().
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class SearchCategory(Enum):
    """Category tag attached to every global search result."""
    PAGE = "page"
    TEAM = "team"
    SERVICE = "service"
    RESOURCE = "resource"
    CONTACT = "contact"
    DEAL = "deal"
    TEMPLATE = "template"


def field_value(record: Any, name: str) -> str:
    """
    Read a textual field from a mapping or an attribute object.

    Missing fields and None read as "". Enums read as their value, other
    non-string values are converted with str().
    """
    if record is None:
        return ""
    if isinstance(record, Mapping):
        value = record.get(name)
    else:
        value = getattr(record, name, None)
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return value if isinstance(value, str) else str(value)


def load_records(path) -> list[dict]:
    """Load a JSON list of row objects exported from the portal database."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list of records")
    return data


@dataclass(frozen=True)
class TeamMember:
    """Brokerage team member (agent, broker, staff)."""
    id: str
    name: str
    title: str = ""
    email: str = ""
    phone: Optional[str] = None
    category: str = ""


@dataclass(frozen=True)
class Contact:
    """CRM contact."""
    id: str
    full_name: str
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    contact_type: str = ""


@dataclass(frozen=True)
class Deal:
    """CRM deal keyed by property."""
    id: str
    property_address: str
    borough: Optional[str] = None
    neighborhood: Optional[str] = None
    property_type: Optional[str] = None


@dataclass(frozen=True)
class ContractTemplate:
    id: str
    name: str
    division: str = ""
    description: Optional[str] = None


@dataclass(frozen=True)
class StaticPage:
    """A fixed page of the public site."""
    id: str
    title: str
    description: str
    category: SearchCategory
    path: str


@dataclass(frozen=True)
class Transaction:
    """
    Closed transaction record.

    agent_name is free text and may list several agents separated by commas.
    """
    id: str
    agent_name: str
    property_address: str = ""
    deal_type: str = ""
