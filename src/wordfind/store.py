# src/wordfind/store.py
from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from .distance import char_mask
from .models import Word

# A scan plan: (normalized length, positions of words with that length)
Bucket = Tuple[int, Sequence[int]]


class Dictionary:
    """
    Immutable, loaded-once word list.

    Words keep their load order; `all()` always yields them in that order.
    Positions are also grouped by normalized length so a scan can visit
    near-length words first and skip lengths that cannot beat its bound.
    `masks` holds each word's character set for the scan's cheap
    lower-bound check.
    Nothing is mutated after __init__, so any number of threads may scan
    the same instance.
    """
    __slots__ = ("_words", "_buckets", "masks", "source")

    def __init__(self, words: Iterable[Word], *, source: str = "<memory>") -> None:
        self._words: Tuple[Word, ...] = tuple(words)
        by_len: Dict[int, List[int]] = defaultdict(list)
        for pos, w in enumerate(self._words):
            by_len[len(w.key)].append(pos)
        self._buckets: Dict[int, Tuple[int, ...]] = {n: tuple(ps) for n, ps in by_len.items()}
        # per-position character sets, parallel to _words
        self.masks: Tuple[int, ...] = tuple(char_mask(w.key) for w in self._words)
        self.source = source

    # ---- read API ----
    def all(self) -> Iterator[Word]:
        """Fresh iterator over every word, stable order."""
        return iter(self._words)

    def __iter__(self) -> Iterator[Word]:
        return self.all()

    def __len__(self) -> int:
        return len(self._words)

    def __getitem__(self, pos: int) -> Word:
        return self._words[pos]

    def __repr__(self) -> str:
        return f"Dictionary(source={self.source!r}, words={len(self._words):,})"

    # ---- scan plans ----
    def buckets_by_distance(self, n: int) -> List[Bucket]:
        """
        Length buckets ordered by |length - n| (shorter first on ties),
        i.e. the order in which a query of length n should visit them.
        """
        order = sorted(self._buckets, key=lambda L: (abs(L - n), L))
        return [(L, self._buckets[L]) for L in order]

    def shard_plans(self, n: int, shards: int) -> List[List[Bucket]]:
        """
        Split every bucket round-robin into `shards` disjoint slices.
        Each plan keeps the nearest-length-first order, so every shard
        tightens its bound as quickly as a sequential scan would.
        """
        shards = max(1, int(shards))
        base = self.buckets_by_distance(n)
        return [[(L, ps[i::shards]) for L, ps in base if ps[i::shards]] for i in range(shards)]
