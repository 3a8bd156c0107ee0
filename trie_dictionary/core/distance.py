# distance.py
# Levenshtein edit distance for fuzzy spelling suggestions.
# Full dynamic-programming table kept in a numpy matrix:
#   d[i, 0] = i, d[0, j] = j
#   d[i, j] = d[i-1, j-1]                                  if s[i-1] == t[j-1]
#           = 1 + min(d[i-1, j], d[i, j-1], d[i-1, j-1])   otherwise

from __future__ import annotations

import numpy as np


def _check(s: str, t: str) -> None:
    if not isinstance(s, str) or not isinstance(t, str):
        raise TypeError("levenshtein expects two str arguments")


def distance_table(s: str, t: str) -> np.ndarray:
    """
    Build the (len(s)+1) x (len(t)+1) edit distance table.
    Cell [i, j] holds the distance between s[:i] and t[:j].
    """
    _check(s, t)
    m, n = len(s), len(t)
    d = np.zeros((m + 1, n + 1), dtype=np.int64)
    d[:, 0] = np.arange(m + 1)
    d[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        cs = s[i - 1]
        for j in range(1, n + 1):
            if cs == t[j - 1]:
                d[i, j] = d[i - 1, j - 1]
            else:
                d[i, j] = 1 + min(d[i - 1, j], d[i, j - 1], d[i - 1, j - 1])
    return d


def levenshtein(s: str, t: str) -> int:
    """Minimum number of single-character inserts, deletes or substitutions turning s into t."""
    _check(s, t)
    if s == t:
        return 0
    # one side empty: the table collapses to its first row/column
    if not s or not t:
        return len(s) + len(t)
    return int(distance_table(s, t)[-1, -1])


def within_distance(s: str, t: str, max_dist: int) -> bool:
    """True if levenshtein(s, t) <= max_dist, skipping the table when lengths alone rule it out."""
    _check(s, t)
    if abs(len(s) - len(t)) > max_dist:
        return False
    return levenshtein(s, t) <= max_dist
