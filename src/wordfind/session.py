from __future__ import annotations
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Optional

from .errors import RankCancelled
from .models import RankedResults
from .search import check_limit

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    generation: int
    query: str
    limit: int
    results: RankedResults


class LiveSearch:
    """
    Keystroke-driven ranking off the input thread.

    Every submit() stamps the query with a new generation and cancels the
    scan still running for the previous one. Scans run one at a time on a
    single background thread; a finished scan publishes only if its
    generation is still the newest, so the UI never shows results for a
    query the user has already changed.
    """

    def __init__(self, engine, *, on_results: Optional[Callable[[Snapshot], None]] = None) -> None:
        self._engine = engine
        self._on_results = on_results
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="wordfind-live")
        self._cond = threading.Condition()
        self._generation = 0
        self._cancel: Optional[threading.Event] = None
        self._latest: Optional[Snapshot] = None
        self._error: Optional[BaseException] = None
        self._error_generation = -1
        self._closed = False

    # ---- producer side (UI thread) ----
    def submit(self, query: str, limit: int) -> int:
        check_limit(limit)
        with self._cond:
            if self._closed:
                raise RuntimeError("LiveSearch is closed")
            if self._cancel is not None:
                self._cancel.set()
            self._generation += 1
            gen = self._generation
            cancel = self._cancel = threading.Event()
        self._executor.submit(self._run, gen, query, limit, cancel)
        return gen

    def latest(self) -> Optional[Snapshot]:
        with self._cond:
            return self._latest

    def pending(self) -> bool:
        """True while the newest generation has not published yet."""
        with self._cond:
            return not self._settled()

    def wait(self, timeout: Optional[float] = None) -> Optional[Snapshot]:
        """Block until the newest generation publishes (or fails), then return it."""
        with self._cond:
            self._cond.wait_for(self._settled, timeout)
            if self._error is not None and self._error_generation == self._generation:
                raise self._error
            return self._latest

    def close(self) -> None:
        with self._cond:
            self._closed = True
            if self._cancel is not None:
                self._cancel.set()
            self._cond.notify_all()
        self._executor.shutdown(wait=True, cancel_futures=True)

    def __enter__(self) -> "LiveSearch":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---- worker side ----
    def _settled(self) -> bool:
        if self._closed:
            return True
        if self._generation == 0 or self._error_generation == self._generation:
            return True
        return self._latest is not None and self._latest.generation == self._generation

    def _run(self, gen: int, query: str, limit: int, cancel: threading.Event) -> None:
        if cancel.is_set():
            return  # superseded before it started
        try:
            rows = self._engine.rank(query, limit, cancel=cancel)
        except RankCancelled:
            log.debug("generation %d cancelled (%r)", gen, query)
            return
        except Exception as e:
            log.exception("rank failed for %r", query)
            with self._cond:
                if gen == self._generation:
                    self._error, self._error_generation = e, gen
                    self._cond.notify_all()
            return

        snap = Snapshot(generation=gen, query=query, limit=limit, results=rows)
        with self._cond:
            if gen != self._generation:
                log.debug("dropping stale results: generation %d < %d", gen, self._generation)
                return
            self._latest = snap
            self._cond.notify_all()
        if self._on_results is not None:
            self._on_results(snap)
