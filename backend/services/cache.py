"""In-memory story cache: one entry per story type, fresh for a fixed TTL.

Each entry pairs a story tuple with the clock reading at which it was
written, and ``set`` replaces the pair as a single object. Reads share a
read/write lock over the whole map; a write excludes every other operation.
Freshness is judged at read time; nothing sweeps expired entries.
"""

import threading
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from models import Story

CACHE_TTL_SECONDS = 5 * 60


class ReadWriteLock:
    """Many concurrent readers, or one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


@dataclass(frozen=True)
class CacheEntry:
    stories: tuple[Story, ...]
    updated_at: float


class TTLCache:
    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}
        self._lock = ReadWriteLock()

    def get(self, key: str) -> tuple[Story, ...] | None:
        """Return the cached stories for ``key`` while fresh, otherwise None.

        An empty tuple is a fresh hit. Stale entries stay in the store until
        the next ``set`` overwrites them.
        """
        with self._lock.read():
            entry = self._store.get(key)
        if entry is None:
            return None
        if self._clock() - entry.updated_at > self.ttl_seconds:
            return None
        return entry.stories

    def set(self, key: str, stories: Sequence[Story]) -> None:
        entry = CacheEntry(stories=tuple(stories), updated_at=self._clock())
        with self._lock.write():
            self._store[key] = entry
