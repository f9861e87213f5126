from __future__ import annotations
import unicodedata
from typing import Optional


def normalize_word(text: str) -> str:
    """
    Normalize a dictionary entry or a query for comparison:
      * Unicode NFC, so composed and decomposed accents compare equal
      * case-insensitive via .casefold()
      * surrounding whitespace trimmed
    Used by both the loader and the ranker; any change here must hold for both.
    """
    return unicodedata.normalize("NFC", text).strip().casefold()


def clean_line(raw: str) -> Optional[str]:
    """Trim a source line; None for blank lines (they are dropped on load)."""
    s = raw.strip()
    return s or None
