"""Pick a "did you mean" suggestion for an invalid enum value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from oasfindings.matching.distance import levenshtein


@dataclass(frozen=True)
class Candidate:
    """A string candidate and its edit distance from the supplied value."""

    value: str
    weight: int


def rank_candidates(value: str, candidates: Sequence[Any]) -> list[Candidate]:
    """Score every string candidate and sort by ascending distance.

    Non-string candidates are skipped. The sort is stable, so ties keep
    their original order.
    """
    scored = [
        Candidate(value=c, weight=levenshtein(value, c))
        for c in candidates
        if isinstance(c, str)
    ]
    return sorted(scored, key=lambda c: c.weight)


def best_match(value: str, candidates: Sequence[Any]) -> str | None:
    """Return the closest candidate to ``value``, or None.

    A lone allowed value is always suggested. Otherwise the best candidate
    is only suggested when its distance is strictly less than its own
    length, so near-total rewrites are never proposed.
    """
    ranked = rank_candidates(value, candidates)
    if not ranked:
        return None
    best = ranked[0]
    if len(candidates) == 1 or best.weight < len(best.value):
        return best.value
    return None
