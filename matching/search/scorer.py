"""
Fuzzy scoring for global search ranking.
"""

from typing import Optional

EXACT_SCORE = 100
PREFIX_SCORE = 80
SUBSTRING_SCORE = 60
SUBSEQUENCE_CHAR_SCORE = 10


def fuzzy_score(query: str, target: Optional[str]) -> int:
    """
    Score how well a query matches a target string (case-insensitive).

    - 100: equal
    - 80: target starts with query
    - 60: target contains query
    - 10 per character when query is an in-order subsequence of target
    - 0: no match

    The score is a ranking key only, not a probability.
    """
    q = query.lower()
    t = "" if target is None else str(target).lower()

    if t == q:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE
    if q in t:
        return SUBSTRING_SCORE

    score = 0
    qi = 0
    for ch in t:
        if qi < len(q) and ch == q[qi]:
            score += SUBSEQUENCE_CHAR_SCORE
            qi += 1

    return score if qi == len(q) else 0
