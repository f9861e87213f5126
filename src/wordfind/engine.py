# src/wordfind/engine.py
from __future__ import annotations

import logging
import os
import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

from . import config as CFG
from .loader import Source, load
from .models import RankedResults
from .normalize import normalize_word
from .search import check_limit, rank
from .store import Dictionary

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the Dictionary Store (loaded once, immutable),
      - the Fuzzy Ranker (search.rank),
      - a worker pool for sharded scans on large dictionaries,
      - a small LRU of recent results (backspacing re-asks old queries).

    Public API (used by the CLI, the terminal picker and Flask):
      * load(source, ...):      read a word file -> attach dictionary
      * attach(dictionary):     use an already built Dictionary
      * rank(query, limit):     return ranked matches
      * shutdown():             stop the pool, drop the dictionary
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        *,
        workers: Optional[int] = None,
        parallel_min_words: Optional[int] = None,
        cache_size: Optional[int] = None,
    ) -> None:
        self.dictionary: Optional[Dictionary] = None
        self.workers = max(1, int(workers if workers is not None else CFG.WORKERS))
        self.parallel_min_words = int(
            parallel_min_words if parallel_min_words is not None else CFG.PARALLEL_MIN_WORDS
        )
        self._cache_size = int(cache_size if cache_size is not None else CFG.RESULT_CACHE_SIZE)
        self._cache: "OrderedDict[Tuple[str, int], RankedResults]" = OrderedDict()
        self._cache_lock = threading.Lock()
        self._pool: Optional[ThreadPoolExecutor] = None

    # /* ~~~ Load a word file once and wire up the pool ~~~ */
    def load(
        self,
        source: Optional[Source] = None,
        *,
        case_sensitive: Optional[bool] = None,
        encoding: Optional[str] = None,
        verbose: bool = False,
    ) -> Dictionary:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            CFG.VERBOSE = True

        src = source if source is not None else CFG.DEFAULT_DICTIONARY
        log.info("Loading dictionary from %s", src if isinstance(src, (str, os.PathLike)) else "<lines>")
        dictionary = load(src, case_sensitive=case_sensitive, encoding=encoding)
        self.attach(dictionary)
        return dictionary

    def attach(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        with self._cache_lock:
            self._cache.clear()
        if self._sharded() and self._pool is None:
            self._pool = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="wordfind-scan")
            log.info("Started scan pool: workers=%d", self.workers)
        log.info("Engine ready: %r", dictionary)

    # ------------- query -------------

    # /* ~~~ Rank the dictionary for one query; safe to call from any thread ~~~ */
    def rank(self, query: str, limit: int = CFG.TOP_K, *, cancel: Optional[threading.Event] = None) -> RankedResults:
        dictionary, pool = self.dictionary, self._pool
        if dictionary is None:
            raise RuntimeError("Engine not initialized. Call load() or attach() first.")
        check_limit(limit)

        ck = (normalize_word(query), limit)
        with self._cache_lock:
            hit = self._cache.get(ck)
            if hit is not None:
                self._cache.move_to_end(ck)
                return list(hit)

        if pool is not None and len(dictionary) >= self.parallel_min_words:
            rows = rank(dictionary, query, limit, executor=pool, shards=self.workers, cancel=cancel)
        else:
            rows = rank(dictionary, query, limit, cancel=cancel)

        if self._cache_size > 0:
            with self._cache_lock:
                self._cache[ck] = rows
                self._cache.move_to_end(ck)
                while len(self._cache) > self._cache_size:
                    self._cache.popitem(last=False)
        return list(rows)

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources ~~~ */
    def shutdown(self) -> None:
        try:
            if self._pool is not None:
                self._pool.shutdown(wait=True, cancel_futures=True)
        finally:
            self._pool = None
            self.dictionary = None
            with self._cache_lock:
                self._cache.clear()
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _sharded(self) -> bool:
        return (self.workers > 1
                and self.dictionary is not None
                and len(self.dictionary) >= self.parallel_min_words)
