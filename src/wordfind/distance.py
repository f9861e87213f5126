from __future__ import annotations
from collections import Counter
from typing import Iterable, Optional, Tuple


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning a into b. Two-row DP, O(min(len(a), len(b))) space.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            cur.append(min(prev[j] + 1,                 # delete
                           cur[j - 1] + 1,              # insert
                           prev[j - 1] + (ca != cb)))   # substitute
        prev = cur
    return prev[-1]


def bounded_levenshtein(a: str, b: str, max_distance: int) -> Optional[int]:
    """
    Levenshtein distance if it is <= max_distance, else None.

    Common prefix and suffix are dropped first (they never change the
    distance). The DP then fills only the diagonal band |i - j| <= k,
    k = max_distance, so a row costs O(k) cells; cells outside the band
    hold k + 1. It stops after any row whose band minimum exceeds k.
    Whenever a number is returned it equals levenshtein(a, b).
    """
    k = max_distance
    if k < 0:
        return None
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if len(a) - len(b) > k:
        return None

    lo = 0
    stop = len(b)
    while lo < stop and a[lo] == b[lo]:
        lo += 1
    ea, eb = len(a), len(b)
    while eb > lo and a[ea - 1] == b[eb - 1]:
        ea -= 1
        eb -= 1
    a, b = a[lo:ea], b[lo:eb]
    m, n = len(a), len(b)
    if not n:
        return m if m <= k else None

    out = k + 1
    prev = [j if j <= k else out for j in range(n + 1)]
    for i in range(1, m + 1):
        ca = a[i - 1]
        first = max(1, i - k)
        last = min(n, i + k)
        cur = [out] * (n + 1)
        if i <= k:
            cur[0] = i
        row_min = cur[0]
        left = cur[first - 1]
        for j in range(first, last + 1):
            v = prev[j - 1] + (ca != b[j - 1])
            if prev[j] + 1 < v:
                v = prev[j] + 1
            if left + 1 < v:
                v = left + 1
            if v > out:
                v = out
            cur[j] = left = v
            if v < row_min:
                row_min = v
        if row_min > k:
            return None
        prev = cur
    d = prev[n]
    return d if d <= k else None


# /* ~~~ cheap lower bounds, checked before the DP ~~~ */

def char_mask(s: str) -> int:
    """Characters of s as a 64-bit set; folded bits only loosen the bound."""
    mask = 0
    for c in s:
        mask |= 1 << (ord(c) & 63)
    return mask


def char_count_lower_bound(a: str, b: str) -> int:
    """
    Lower bound on levenshtein(a, b) from character counts alone.

    An edit removes at most one surplus occurrence from each side, so the
    distance is at least the larger of the two multiset differences.
    """
    ca, cb = Counter(a), Counter(b)
    return max(sum((ca - cb).values()), sum((cb - ca).values()))


def count_profile(s: str) -> Tuple[Tuple[str, int], ...]:
    """(char, count) pairs of s, the query-side input of surplus_exceeds."""
    return tuple(Counter(s).items())


def surplus_exceeds(profile: Iterable[Tuple[str, int]], word: str, bound: int) -> bool:
    """
    True if the query characters missing from `word` (counted with
    multiplicity) already exceed `bound`. Never larger than
    char_count_lower_bound, so a True answer means the word cannot be
    within `bound`.
    """
    gap = 0
    for c, n in profile:
        short = n - word.count(c)
        if short > 0:
            gap += short
            if gap > bound:
                return True
    return False
