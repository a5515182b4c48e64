"""Cached, asynchronously resolved access to the TMDB collections.

Each collection is a query keyed by (kind, language). A query is either
loading, success or error. Successful data older than the TTL is stale:
it keeps being served while a background refetch replaces it.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, replace
from typing import Callable

from moviedash.config import CACHE_TTL_SECONDS
from moviedash.data.tmdb import FETCHERS, load_cached

LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class QueryState:
    status: str = LOADING
    data: list[dict] | None = None
    error: str | None = None
    fetched_at: float | None = None
    failed_at: float | None = None
    is_fetching: bool = False

    @property
    def is_loading(self) -> bool:
        return self.status == LOADING

    @property
    def is_error(self) -> bool:
        return self.status == ERROR


class MovieSource:
    """Fetches movies and genres per language with a stale-while-revalidate cache."""

    def __init__(
        self,
        ttl: float = CACHE_TTL_SECONDS,
        fetchers: dict[str, Callable[[str], list[dict]]] | None = None,
        executor=None,
        clock: Callable[[], float] = time.time,
        use_disk_cache: bool = True,
    ) -> None:
        self.ttl = ttl
        self.fetchers = fetchers or FETCHERS
        self.clock = clock
        self.use_disk_cache = use_disk_cache
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="tmdb")
        self._states: dict[tuple[str, str], QueryState] = {}
        self._inflight: dict[tuple[str, str], Future] = {}
        # Re-entrant: a future that is already done runs its callback on the submitting thread
        self._lock = threading.RLock()

    def is_stale(self, state: QueryState) -> bool:
        if state.status != SUCCESS or state.fetched_at is None:
            return False
        # A failed refresh starts a new TTL window instead of retrying on every query
        last_attempt = max(state.fetched_at, state.failed_at or 0.0)
        return self.clock() - last_attempt >= self.ttl

    def query(self, kind: str, language: str) -> QueryState:
        """Return the current state of a query, starting a fetch when needed.

        A fetch starts when nothing is known yet or when the data is stale.
        Failed queries stay failed until refetch() is called.
        """
        key = (kind, language)
        with self._lock:
            state = self._states.get(key)
            if state is None and self.use_disk_cache:
                cached = load_cached(kind, language)
                if cached is not None:
                    data, fetched_at = cached
                    state = QueryState(SUCCESS, data=data, fetched_at=fetched_at)
                    self._states[key] = state
            if state is None or self.is_stale(state):
                self._start_fetch(key)
            return self._current(key)

    def refetch(self, kind: str, language: str) -> QueryState:
        """Force a new fetch, keeping any previous data visible meanwhile."""
        key = (kind, language)
        with self._lock:
            self._start_fetch(key)
            return self._current(key)

    def load(self, language: str) -> tuple[QueryState, QueryState]:
        """Query movies and genres for a language; both fetches run concurrently."""
        return self.query("movies", language), self.query("genres", language)

    def wait(self, timeout: float | None = None) -> None:
        """Block until every in-flight fetch has finished."""
        with self._lock:
            pending = list(self._inflight.values())
        if pending:
            wait(pending, timeout=timeout)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False)

    def _current(self, key: tuple[str, str]) -> QueryState:
        state = self._states.get(key, QueryState())
        return replace(state, is_fetching=key in self._inflight)

    def _start_fetch(self, key: tuple[str, str]) -> None:
        if key in self._inflight:
            return
        kind, language = key
        fetcher = self.fetchers[kind]
        self._states.setdefault(key, QueryState())
        future = self._executor.submit(fetcher, language)
        self._inflight[key] = future
        future.add_done_callback(lambda f: self._complete(key, f))

    def _complete(self, key: tuple[str, str], future: Future) -> None:
        with self._lock:
            self._inflight.pop(key, None)
            previous = self._states.get(key, QueryState())
            try:
                data = future.result()
            except Exception as e:  # recorded on the query, any failure must leave the loading state
                kind, language = key
                print(f"  Failed to fetch {kind} ({language}): {e}")
                if previous.status == SUCCESS:
                    # Keep serving the stale copy, but report the failed refresh
                    self._states[key] = replace(previous, error=str(e), failed_at=self.clock())
                else:
                    self._states[key] = QueryState(ERROR, error=str(e))
                return
            self._states[key] = QueryState(SUCCESS, data=data, fetched_at=self.clock())
