"""
Agent name matching strategies.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from config.logging import logger
from matching.entity_resolution.normalizer import name_tokens, normalize_name
from matching.models import field_value


class MatchTier(Enum):
    """Strategy that produced a match."""
    EXACT = "exact"              # Normalized names identical
    FIRST_LAST = "first_last"    # First and last tokens agree, middle ignored
    FIRST_NAME = "first_name"    # First token only (loose fallback)
    NO_MATCH = "no_match"


@dataclass
class MatchResult:
    """Result of matching one query name segment."""
    segment: str
    record: Optional[Any] = None
    tier: MatchTier = MatchTier.NO_MATCH
    details: dict = field(default_factory=dict)

    @property
    def is_match(self) -> bool:
        return self.record is not None

    def __repr__(self) -> str:
        if self.record is not None:
            return f"<MatchResult({self.segment!r} -> {field_value(self.record, 'id')}, {self.tier.value})>"
        return f"<MatchResult({self.segment!r}, no match)>"


def split_names(query_name: Optional[str]) -> list[str]:
    """Split a comma-separated list of names, trimming and dropping empties."""
    if not query_name:
        return []
    return [part.strip() for part in query_name.split(",") if part.strip()]


class AgentNameMatcher:
    """
    Matches a free-text person name against candidate records.

    Tiers are tried in order and the first candidate (in input order) that
    satisfies a tier wins:
    1. Exact normalized name
    2. First + last token (tolerates middle names and initials)
    3. First token only (catches nicknames, can pick the wrong person when
       several candidates share a first name)
    """

    def __init__(self, name_field: str = "name"):
        """
        Initialize matcher.

        Args:
            name_field: Record field holding the person's display name
        """
        self.name_field = name_field

    def match(self, segment: str, candidates: Optional[Iterable[Any]]) -> MatchResult:
        """
        Find the best candidate for a single name segment.

        Returns:
            MatchResult with the matched record and tier, or an empty
            MatchResult when nothing matches
        """
        query_tokens = name_tokens(segment)
        if not query_tokens:
            return MatchResult(segment=segment)

        # Normalize candidates once, keeping input order
        indexed = [
            (record, name_tokens(field_value(record, self.name_field)))
            for record in (candidates or [])
        ]
        normalized_query = " ".join(query_tokens)
        details = {"normalized_query": normalized_query}

        # Tier 1: exact
        for record, tokens in indexed:
            if " ".join(tokens) == normalized_query:
                return MatchResult(segment, record, MatchTier.EXACT, details)

        # Tier 2: first + last
        if len(query_tokens) >= 2:
            first, last = query_tokens[0], query_tokens[-1]
            for record, tokens in indexed:
                if len(tokens) >= 2 and tokens[0] == first and tokens[-1] == last:
                    return MatchResult(segment, record, MatchTier.FIRST_LAST, details)

        # Tier 3: first name only
        for record, tokens in indexed:
            if tokens and tokens[0] == query_tokens[0]:
                return MatchResult(segment, record, MatchTier.FIRST_NAME, details)

        logger.debug(f"No candidate matched '{segment}' ({normalized_query})")
        return MatchResult(segment=segment, details=details)

    def find_match(self, query_name: str, candidates: Optional[Iterable[Any]]) -> Optional[Any]:
        """Return the matched record for a single name, or None."""
        return self.match(query_name, candidates).record

    def normalized_name(self, record: Any) -> str:
        """Normalized display name of a candidate record."""
        return normalize_name(field_value(record, self.name_field))


def find_match(
    query_name: str,
    candidates: Optional[Iterable[Any]],
    name_field: str = "name",
) -> Optional[Any]:
    """Find the record matching a single person name, or None."""
    return AgentNameMatcher(name_field).find_match(query_name, candidates)
