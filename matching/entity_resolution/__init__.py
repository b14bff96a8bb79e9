"""
Entity Resolution Module

Tiered person name matching for associating free-text agent names with
team member and contact records:
- Exact normalized name
- First + last name
- First name only (loose fallback)
"""

from matching.entity_resolution.normalizer import normalize_name, name_tokens
from matching.entity_resolution.matchers import (
    AgentNameMatcher,
    MatchResult,
    MatchTier,
    find_match,
    split_names,
)
from matching.entity_resolution.resolver import (
    AgentResolver,
    ResolutionStats,
    ResolverConfig,
)

__all__ = [
    "AgentNameMatcher",
    "AgentResolver",
    "MatchResult",
    "MatchTier",
    "ResolutionStats",
    "ResolverConfig",
    "find_match",
    "name_tokens",
    "normalize_name",
    "split_names",
]
