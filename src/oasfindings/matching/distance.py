"""Levenshtein edit distance."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Return the unit-cost, case-sensitive edit distance between ``a`` and ``b``.

    Counts single-character insertions, deletions and substitutions. Uses a
    single rolling row, so memory is O(len(b)).
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        prev = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            saved = row[j]
            cost = 0 if ca == cb else 1
            row[j] = min(
                row[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev + cost,  # substitution
            )
            prev = saved
    return row[len(b)]
