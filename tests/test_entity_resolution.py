"""
Tests for the agent name resolution module.
"""

import copy

import pytest

from matching.entity_resolution import (
    AgentNameMatcher,
    AgentResolver,
    MatchTier,
    ResolverConfig,
    find_match,
    name_tokens,
    normalize_name,
    split_names,
)
from matching.models import TeamMember


def member(name, member_id=None):
    return TeamMember(id=member_id or name.lower().replace(" ", "-"), name=name)


# --- Name normalization ---

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("John O'Brien-Smith  ", "john obriensmith"),
        ("  JANE    DOE ", "jane doe"),
        ("Jane D.", "jane d"),
        ("Agent 007 Bond", "agent bond"),
        ("José\tRamírez", "jos ramrez"),
        ("", ""),
        ("   ", ""),
        (None, ""),
    ],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["John O'Brien-Smith  ", "Maria de la Cruz", "A.B.  C--d", "  x  ", "12 34", "Ünïcödé Name"],
)
def test_normalize_name_is_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once


def test_name_tokens():
    assert name_tokens("John  Michael Smith") == ["john", "michael", "smith"]
    assert name_tokens("!!!") == []


def test_split_names():
    assert split_names("Jane Doe, John Smith") == ["Jane Doe", "John Smith"]
    assert split_names(" , Jane Doe,,  ,") == ["Jane Doe"]
    assert split_names("") == []
    assert split_names(None) == []


# --- Tiered matching ---

def test_exact_match_takes_precedence():
    candidates = [member("Jane D."), member("Jane Doe")]
    result = AgentNameMatcher().match("Jane Doe", candidates)

    assert result.is_match
    assert result.record.name == "Jane Doe"
    assert result.tier == MatchTier.EXACT


def test_exact_match_ignores_case_and_punctuation():
    candidates = [member("John O'Brien-Smith")]
    assert find_match("john obrien-smith", candidates).name == "John O'Brien-Smith"


def test_first_last_beats_first_name_only():
    candidates = [member("John Anderson"), member("John Michael Smith")]
    result = AgentNameMatcher().match("John Smith", candidates)

    assert result.record.name == "John Michael Smith"
    assert result.tier == MatchTier.FIRST_LAST


def test_first_last_ignores_query_middle_name():
    candidates = [member("Maria Cruz")]
    result = AgentNameMatcher().match("Maria de la Cruz", candidates)

    assert result.record.name == "Maria Cruz"
    assert result.tier == MatchTier.FIRST_LAST


def test_first_name_fallback():
    candidates = [member("Jane Doe"), member("Robert Johnson")]
    result = AgentNameMatcher().match("Bob", candidates)
    assert not result.is_match

    result = AgentNameMatcher().match("Robert Johnston", candidates)
    assert result.record.name == "Robert Johnson"
    assert result.tier == MatchTier.FIRST_NAME


def test_input_order_breaks_ties():
    adams, baker = member("John Adams"), member("John Baker")

    assert find_match("John", [adams, baker]) is adams
    assert find_match("John", [baker, adams]) is baker


def test_no_match_returns_none(team_members):
    assert find_match("Zzyx Qqrv", team_members) is None

    result = AgentNameMatcher().match("Zzyx Qqrv", team_members)
    assert result.tier == MatchTier.NO_MATCH
    assert not result.is_match


def test_empty_and_tokenless_queries_match_nothing():
    candidates = [{"id": "blank", "name": None}, {"id": "digits", "name": "123"}]

    assert find_match("", candidates) is None
    assert find_match("123", candidates) is None
    assert find_match("--", candidates) is None


def test_missing_candidates_and_fields_are_tolerated():
    assert find_match("Jane Doe", None) is None
    assert find_match("Jane Doe", []) is None

    rows = [{"id": "no-name"}, {"id": "r-1", "name": "Jane Doe"}]
    assert find_match("Jane Doe", rows)["id"] == "r-1"


def test_custom_name_field():
    contacts = [{"id": "c-1", "full_name": "Jane Doe", "company": "Doe Holdings"}]

    assert find_match("Jane Doe", contacts, name_field="full_name")["id"] == "c-1"
    assert find_match("Jane Doe", contacts) is None


def test_matching_does_not_mutate_candidates():
    rows = [{"id": "r-1", "name": "Jane Doe"}, {"id": "r-2", "name": "John Smith"}]
    before = copy.deepcopy(rows)

    AgentResolver().resolve("Jane Doe, John, Nobody Here", rows)

    assert rows == before


# --- Resolver ---

def test_resolve_comma_separated_names(team_members):
    results = AgentResolver().resolve("Jane Doe, John Smith", team_members)

    assert len(results) == 2
    assert [r.segment for r in results] == ["Jane Doe", "John Smith"]
    assert results[0].record.id == "tm-1"
    assert results[0].tier == MatchTier.EXACT
    assert results[1].record.id == "tm-2"
    assert results[1].tier == MatchTier.FIRST_LAST


def test_resolve_produces_one_result_per_segment(team_members):
    results = AgentResolver().resolve("Zzyx Qqrv, , Jane Doe, Jane Doe", team_members)

    assert len(results) == 3
    assert not results[0].is_match
    assert results[1].record is results[2].record


def test_resolve_empty_input(team_members):
    assert AgentResolver().resolve("", team_members) == []
    assert AgentResolver().resolve(None, team_members) == []
    assert AgentResolver().resolve("Jane Doe", None)[0].is_match is False


def test_ambiguous_first_name_match_is_flagged(team_members):
    result = AgentResolver().resolve("John", team_members)[0]

    # Resolution is unchanged: first candidate in input order wins
    assert result.record.id == "tm-2"
    assert result.tier == MatchTier.FIRST_NAME
    assert result.details["ambiguous"] is True
    assert result.details["alternatives"] == ["John Anderson"]


def test_unique_first_name_match_is_not_flagged(team_members):
    result = AgentResolver().resolve("Maria", team_members)[0]

    assert result.record.id == "tm-4"
    assert "ambiguous" not in result.details


def test_unmatched_segment_gets_suggestions():
    candidates = [member("John Smith"), member("Jane Doe")]
    resolver = AgentResolver(ResolverConfig(suggestion_threshold=70, suggestion_limit=3))

    result = resolver.resolve("Jon Smyth", candidates)[0]

    assert not result.is_match
    names = [name for name, _ in result.details["suggestions"]]
    assert names == ["John Smith"]
    assert result.details["suggestions"][0][1] >= 70


def test_suggestions_respect_threshold_and_limit(team_members):
    resolver = AgentResolver(ResolverConfig(suggestion_threshold=70, suggestion_limit=0))
    assert "suggestions" not in resolver.resolve("Jon Smyth", team_members)[0].details

    resolver = AgentResolver(ResolverConfig(suggestion_threshold=70, suggestion_limit=3))
    assert "suggestions" not in resolver.resolve("Zzyx Qqrv", team_members)[0].details


def test_resolve_transactions(team_members, transactions):
    resolved, stats = AgentResolver().resolve_transactions(transactions, team_members)

    assert list(resolved) == ["tx-1", "tx-2", "tx-3"]
    assert [r.record.id for r in resolved["tx-1"]] == ["tm-1", "tm-2"]
    assert not resolved["tx-2"][0].is_match
    assert resolved["tx-3"][0].details["ambiguous"] is True

    assert stats.records == 3
    assert stats.segments == 4
    assert stats.unmatched == 1
    assert stats.ambiguous == 1
    assert stats.tier_counts == {
        "exact": 1,
        "first_last": 1,
        "no_match": 1,
        "first_name": 1,
    }


def test_resolve_transactions_with_rows(team_members):
    rows = [{"id": "tx-9", "agent_name": None}, {"id": "tx-10"}]
    resolved, stats = AgentResolver().resolve_transactions(rows, team_members)

    assert resolved == {"tx-9": [], "tx-10": []}
    assert stats.segments == 0


def test_resolver_config_defaults_follow_settings(monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "SUGGESTION_LIMIT", 0)
    monkeypatch.setattr(settings, "SUGGESTION_THRESHOLD", 95)

    config = AgentResolver(ResolverConfig(name_field="full_name")).config
    assert config.name_field == "full_name"
    assert config.suggestion_limit == 0
    assert config.suggestion_threshold == 95

    explicit = ResolverConfig(suggestion_limit=2)
    assert explicit.suggestion_limit == 2
    assert explicit.suggestion_threshold == 95


def test_resolver_without_config_uses_settings(monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "SUGGESTION_LIMIT", 0)
    candidates = [member("John Smith")]

    result = AgentResolver().resolve("Jon Smyth", candidates)[0]

    assert not result.is_match
    assert "suggestions" not in result.details
