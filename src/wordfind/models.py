# src/wordfind/models.py
"""
Data models for the fuzzy word finder.

- Word: one dictionary entry (display text + normalized comparison key).
- ScoredMatch: a Word together with its distance and normalized score.

These classes hold no business logic; loading lives in loader.py and
ranking in search.py.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True, slots=True)
class Word:
    """
    Attributes
    ----------
    text : str
        The entry as it appeared in the source (trimmed, original casing).
    key : str
        Normalized form used for comparison and tie-breaking. Produced by
        normalize.normalize_word so loader and ranker always agree.
    """
    text: str
    key: str


@dataclass(frozen=True, slots=True)
class ScoredMatch:
    word: str            # display text
    score: float         # distance / max(len(query), len(word)), in [0, 1]
    distance: int        # raw Levenshtein distance on normalized text
    key: str             # normalized text (tie-break)

    def to_dict(self) -> dict:
        return {"word": self.word, "score": self.score, "distance": self.distance}


RankedResults = List[ScoredMatch]
