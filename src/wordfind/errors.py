from __future__ import annotations


class WordFindError(Exception):
    """Base class for everything the engine raises on purpose."""


class LoadError(WordFindError):
    """Dictionary source missing, unreadable, or empty after cleaning."""


class InvalidInput(WordFindError, ValueError):
    """A caller broke the rank() contract (negative or non-integer limit)."""


class RankCancelled(WordFindError):
    """A scan was superseded by a newer query and stopped early."""
