"""
Relevance scoring for eldamo-lookup.

An entry is scored by its best matching token:
- exact token match: 100
- query is a prefix of the token: 100 * len(query) / len(token)
- query occurs inside the token: 70 * len(query) / len(token)
"""

import math
from typing import Iterable

EXACT_SCORE = 100
PREFIX_WEIGHT = 100
SUBSTRING_WEIGHT = 70


def score_token(token: str, query: str) -> float:
    """Score one token against a folded query."""
    if token == query:
        return EXACT_SCORE
    if token.startswith(query):
        return PREFIX_WEIGHT * len(query) / len(token)
    if query in token:
        return SUBSTRING_WEIGHT * len(query) / len(token)
    return 0


def score(tokens: Iterable[str], query: str) -> int:
    """
    Score an entry's tokens against a folded query, from 0 to 100.

    Only the best token counts. 100 is reserved for an exact token match;
    partial matches are capped at 99 even when they round up.

    Example:
        >>> score(["aragorn"], "ara")
        43
        >>> score(["aragorn"], "agor")
        40
    """
    if not query:
        return 0

    best = 0.0
    for token in tokens:
        token_score = score_token(token, query)
        if token_score >= EXACT_SCORE:
            return EXACT_SCORE
        best = max(best, token_score)

    # Half-up rounding, not round()'s half-to-even
    return min(int(math.floor(best + 0.5)), EXACT_SCORE - 1)
