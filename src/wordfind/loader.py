from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from . import config as CFG
from .errors import LoadError
from .models import Word
from .normalize import clean_line, normalize_word
from .store import Dictionary

log = logging.getLogger(__name__)

PROGRESS_EVERY_WORDS = 100_000

Source = Union[str, os.PathLike, Iterable[str]]


def _read_lines(path: Path, encoding: str) -> List[str]:
    """Read a word file; fall back to Latin-1 for legacy system lists."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise LoadError(f"cannot read dictionary {str(path)!r}: {e.strerror or e}") from e
    try:
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            log.warning("%s is not valid %s; decoding as %s", path, encoding, CFG.FALLBACK_ENCODING)
            text = raw.decode(CFG.FALLBACK_ENCODING)  # latin-1 maps every byte
    except LookupError as e:
        raise LoadError(f"unknown encoding for {str(path)!r}: {e}") from e
    return text.splitlines()


def _yield_words(lines: Iterable[str], case_sensitive: bool) -> Iterable[Word]:
    """Trimmed, non-empty, first-occurrence-wins words."""
    seen: Set[str] = set()
    for i, raw in enumerate(lines, start=1):
        text = clean_line(raw)
        if text is None:
            continue
        key = normalize_word(text)
        dedupe = text if case_sensitive else key
        if dedupe in seen:
            continue
        seen.add(dedupe)
        yield Word(text=text, key=key)
        if CFG.VERBOSE and i % PROGRESS_EVERY_WORDS == 0:
            log.info("[scanned] lines=%s kept=%s", f"{i:,}", f"{len(seen):,}")


def load(source: Source,
         *,
         case_sensitive: Optional[bool] = None,
         encoding: Optional[str] = None) -> Dictionary:
    """
    Build an immutable Dictionary from a line-oriented source.

    source: a file path (one word per line) or any iterable of lines.
    case_sensitive: dedupe policy; default config.CASE_SENSITIVE.
        Comparison while ranking is always case-insensitive.
    Raises LoadError if the source is missing, unreadable, or has no words.
    """
    cs = CFG.CASE_SENSITIVE if case_sensitive is None else bool(case_sensitive)

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if not path.is_file():
            raise LoadError(f"dictionary not found: {str(path)!r}")
        lines: Iterable[str] = _read_lines(path, encoding or CFG.ENCODING)
        label = str(path)
    else:
        lines = source
        label = "<lines>"

    words = list(_yield_words(lines, cs))
    if not words:
        raise LoadError(f"dictionary {label!r} has no words")

    log.info("Loaded %s words from %s (case_sensitive=%s)", f"{len(words):,}", label, cs)
    return Dictionary(words, source=label)
