"""
Fuzzy Word Finder Engine

Ranks the words of a large in-memory dictionary against a misspelled or
partial query, fast enough to re-run on every keystroke.

- Dictionary loading and normalization (loader, store, normalize)
- Levenshtein scoring, ranking, pruning and sharded scans (distance, search)
- Orchestration and live, stale-dropping query submission (engine, session)

Example Usage:
    from wordfind import Engine

    eng = Engine()
    eng.load("/usr/share/dict/words")
    for m in eng.rank("becuase", limit=5):
        print(f"{m.score:.3f}  {m.word}")
    eng.shutdown()
"""

# src/wordfind/__init__.py
from .engine import Engine
from .errors import InvalidInput, LoadError, RankCancelled, WordFindError
from .loader import load
from .models import ScoredMatch, Word
from .search import rank
from .session import LiveSearch, Snapshot
from .store import Dictionary

__version__ = "1.0.0"
__all__ = [
    "Engine", "LiveSearch", "Snapshot",
    "Dictionary", "Word", "ScoredMatch",
    "load", "rank",
    "WordFindError", "LoadError", "InvalidInput", "RankCancelled",
]
