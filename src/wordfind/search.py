from __future__ import annotations
import bisect
import heapq
import threading
from concurrent.futures import Executor
from itertools import islice
from typing import List, Optional, Sequence, Tuple

from . import config as CFG
from .distance import bounded_levenshtein, char_mask, count_profile, levenshtein, surplus_exceeds
from .errors import InvalidInput, RankCancelled
from .models import RankedResults, ScoredMatch
from .normalize import normalize_word
from .store import Bucket, Dictionary

# (score, key, text, distance): tuple order IS the ranking order
_Entry = Tuple[float, str, str, int]


def normalized_score(distance: int, query_len: int, word_len: int) -> float:
    """distance / max(len(query), len(word)); 0.0 for two empty strings."""
    span = max(query_len, word_len)
    return distance / span if span else 0.0


def score_word(query: str, word: str) -> Tuple[float, int]:
    """(score, distance) of one word against one query, both normalized first."""
    q, w = normalize_word(query), normalize_word(word)
    d = levenshtein(q, w)
    return normalized_score(d, len(q), len(w)), d


def check_limit(limit) -> None:
    # bool is an int subclass; rank(d, q, True) is a caller bug, not limit=1
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidInput(f"limit must be an int, got {type(limit).__name__}")
    if limit < 0:
        raise InvalidInput(f"limit must be >= 0, got {limit}")


def _scan(dictionary: Dictionary,
          q: str,
          limit: int,
          plan: Sequence[Bucket],
          cancel: Optional[threading.Event]) -> List[_Entry]:
    """
    Top-`limit` entries over the words named by `plan`, ascending.

    /* ~~~ pruning ~~~ */
    Once `best` is full, its last entry (dw / Lw) is the score to beat.
    A word whose normalized span is L can only enter with a distance
    d <= floor(dw * L / Lw); the length gap is a lower bound on d, so whole
    buckets are skipped, and the DP for the rest is bounded by that value.
    Entries rejected this way score strictly worse than the current worst,
    so the result equals the unpruned ranking.

    Before the DP, two cheap lower bounds on d are tried: distinct
    characters one side has and the other lacks (bitset popcount), then
    the query characters missing from the word counted with multiplicity.
    """
    m = len(q)
    q_mask = char_mask(q)
    profile = count_profile(q)
    masks = dictionary.masks
    best: List[_Entry] = []
    worst_d = worst_span = 0
    seen = 0
    every = max(1, CFG.CANCEL_CHECK_EVERY)

    for L, positions in plan:
        if cancel is not None and cancel.is_set():
            raise RankCancelled(q)
        span = max(m, L)
        full = len(best) == limit
        bound = (worst_d * span) // worst_span if full else span
        if full and abs(L - m) > bound:
            continue

        for pos in positions:
            seen += 1
            if cancel is not None and seen % every == 0 and cancel.is_set():
                raise RankCancelled(q)

            w = dictionary[pos]
            if full:
                wm = masks[pos]
                if (q_mask & ~wm).bit_count() > bound or (wm & ~q_mask).bit_count() > bound:
                    continue
                if surplus_exceeds(profile, w.key, bound):
                    continue
                d = bounded_levenshtein(q, w.key, bound)
                if d is None:
                    continue
            else:
                d = levenshtein(q, w.key)

            entry = (d / span, w.key, w.text, d)
            if full:
                if not entry < best[-1]:
                    continue
                bisect.insort(best, entry)
                best.pop()
            else:
                bisect.insort(best, entry)
                if len(best) < limit:
                    continue
                full = True

            # worst changed (or list just filled): tighten the bound
            worst_d = best[-1][3]
            worst_span = max(m, len(best[-1][1]))
            bound = (worst_d * span) // worst_span
    return best


def rank(dictionary: Dictionary,
         query: str,
         limit: int,
         *,
         executor: Optional[Executor] = None,
         shards: int = 1,
         cancel: Optional[threading.Event] = None) -> RankedResults:
    """
    Rank every word of `dictionary` against `query`.

    Score is the Levenshtein distance of the normalized strings divided by
    the longer length; results are ordered by (score, key, text) and cut to
    `limit`. An empty query or limit 0 gives []. A negative limit raises
    InvalidInput.

    With an executor and shards > 1 the scan is split into disjoint shards
    whose partial top-k lists are k-way merged; the output is identical to
    the sequential scan. A set `cancel` event stops the scan with
    RankCancelled.
    """
    check_limit(limit)
    q = normalize_word(query)
    if not q or limit == 0 or len(dictionary) == 0:
        return []

    if executor is None or shards <= 1:
        entries = _scan(dictionary, q, limit, dictionary.buckets_by_distance(len(q)), cancel)
    else:
        plans = dictionary.shard_plans(len(q), shards)
        futures = [executor.submit(_scan, dictionary, q, limit, plan, cancel) for plan in plans]
        parts = [f.result() for f in futures]
        entries = list(islice(heapq.merge(*parts), limit))

    return [ScoredMatch(word=text, score=score, distance=d, key=key)
            for score, key, text, d in entries]
