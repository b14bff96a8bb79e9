"""
Agent Name Resolver

Resolves free-text agent names (possibly several per transaction) to
team member or contact records, and flags results a person should double
check.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from rapidfuzz import fuzz, process

from config.logging import logger
from config.settings import settings
from matching.entity_resolution.matchers import (
    AgentNameMatcher,
    MatchResult,
    MatchTier,
    split_names,
)
from matching.entity_resolution.normalizer import name_tokens
from matching.models import field_value


@dataclass
class ResolverConfig:
    """Configuration for agent name resolution."""
    # Record field holding the display name
    name_field: str = "name"

    # Minimum rapidfuzz score (0-100) for a "did you mean" suggestion
    suggestion_threshold: int = field(default_factory=lambda: settings.SUGGESTION_THRESHOLD)

    # Maximum suggestions attached to an unmatched segment
    suggestion_limit: int = field(default_factory=lambda: settings.SUGGESTION_LIMIT)


@dataclass
class ResolutionStats:
    """Statistics from a batch resolution run."""
    records: int = 0
    segments: int = 0
    tier_counts: dict[str, int] = field(default_factory=dict)
    ambiguous: int = 0
    unmatched: int = 0

    def record(self, result: MatchResult):
        self.segments += 1
        key = result.tier.value
        self.tier_counts[key] = self.tier_counts.get(key, 0) + 1
        if not result.is_match:
            self.unmatched += 1
        if result.details.get("ambiguous"):
            self.ambiguous += 1


class AgentResolver:
    """
    Resolves comma-separated agent name lists against candidate records.

    Resolution itself is delegated to AgentNameMatcher; the resolver adds:
    - one MatchResult per name segment, in input order
    - an ambiguity flag when a first-name-only match had several candidates
    - rapidfuzz suggestions for segments that matched nothing

    Usage:
        resolver = AgentResolver()
        for result in resolver.resolve("Jane Doe, John Smith", team_members):
            if result.is_match:
                print(result.segment, "->", result.record.name)
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config or ResolverConfig()
        self.matcher = AgentNameMatcher(self.config.name_field)

    def resolve(self, query_name: Optional[str], candidates: Optional[Iterable[Any]]) -> list[MatchResult]:
        """
        Resolve every name in a comma-separated list.

        Args:
            query_name: Free-text name list, e.g. "Jane Doe, John Smith"
            candidates: Records to match against (None behaves as empty)

        Returns:
            One MatchResult per non-empty segment, in input order
        """
        candidate_list = list(candidates or [])
        results = []

        for segment in split_names(query_name):
            result = self.matcher.match(segment, candidate_list)

            if result.tier == MatchTier.FIRST_NAME:
                self._flag_ambiguity(result, candidate_list)
            elif not result.is_match:
                suggestions = self.suggest(segment, candidate_list)
                if suggestions:
                    result.details["suggestions"] = suggestions

            logger.debug(f"Resolved agent segment: {result}")
            results.append(result)

        return results

    def find_match(self, query_name: str, candidates: Optional[Iterable[Any]]) -> Optional[Any]:
        """Match a single name; see AgentNameMatcher.find_match."""
        return self.matcher.find_match(query_name, candidates)

    def resolve_transactions(
        self,
        transactions: Optional[Iterable[Any]],
        candidates: Optional[Iterable[Any]],
        agent_field: str = "agent_name",
    ) -> tuple[dict[str, list[MatchResult]], ResolutionStats]:
        """
        Resolve the agent names of a batch of transactions.

        Returns:
            Tuple of (results keyed by transaction id, stats)
        """
        candidate_list = list(candidates or [])
        stats = ResolutionStats()
        resolved = {}

        for transaction in transactions or []:
            results = self.resolve(field_value(transaction, agent_field), candidate_list)
            resolved[field_value(transaction, "id")] = results
            stats.records += 1
            for result in results:
                stats.record(result)

        logger.info(
            f"Resolved {stats.segments} agent names across {stats.records} transactions "
            f"({stats.unmatched} unmatched, {stats.ambiguous} ambiguous)"
        )
        return resolved, stats

    def suggest(self, segment: str, candidates: list[Any]) -> list[tuple[str, float]]:
        """
        Closest candidate names for a segment that did not match.

        Returns list of (display name, score) pairs, best first.
        """
        if self.config.suggestion_limit <= 0:
            return []

        choices = {}
        for index, record in enumerate(candidates):
            normalized = self.matcher.normalized_name(record)
            if normalized:
                choices[index] = normalized
        if not choices:
            return []

        extracted = process.extract(
            " ".join(name_tokens(segment)),
            choices,
            scorer=fuzz.token_sort_ratio,
            limit=self.config.suggestion_limit,
            score_cutoff=self.config.suggestion_threshold,
        )
        return [
            (field_value(candidates[index], self.config.name_field), score)
            for _, score, index in extracted
        ]

    def _flag_ambiguity(self, result: MatchResult, candidates: list[Any]):
        """Mark a first-name-only match when other candidates share the first name."""
        first = name_tokens(result.segment)[0]
        alternatives = [
            field_value(record, self.config.name_field)
            for record in candidates
            if record is not result.record
            and name_tokens(field_value(record, self.config.name_field))[:1] == [first]
        ]
        if alternatives:
            result.details["ambiguous"] = True
            result.details["alternatives"] = alternatives
            logger.warning(
                f"Ambiguous first-name match for '{result.segment}': "
                f"chose '{field_value(result.record, self.config.name_field)}', "
                f"also matches {alternatives}"
            )
