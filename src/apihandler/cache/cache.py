"""Time-based in-memory cache for GET response bodies.

Entries are keyed by the exact URL string (case-sensitive, no
normalisation) and hold the response text plus the clock reading at which
they were created. An entry is *fresh* while its age is at most
``ttl_seconds`` and *expired* afterwards; the transition is a pure function
of the stored timestamp and the current clock, evaluated lazily on read.
Expired entries stay in the mapping until the same URL is fetched again or
the cache is cleared.

Mapping access is guarded by a :class:`threading.Lock`. The lock is never
held across network I/O, so concurrent misses on one URL each fetch and the
last store wins.

See Also:
    :class:`~apihandler.models.CacheConfig` -- controls ``enabled`` and
    ``ttl_seconds``.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from apihandler.models import DEFAULT_TTL_SECONDS

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry:
    """A cached response body and the clock reading when it was stored."""

    content: str
    created_at: float

    def age(self, now: float) -> float:
        return now - self.created_at

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        return self.age(now) > ttl_seconds


class ResponseCache:
    """Per-handler cache of GET response bodies keyed by URL.

    Args:
        ttl_seconds: How long an entry stays fresh. Defaults to 60 seconds.
        clock: Monotonic time source returning seconds. Tests inject a
            fake clock to move time without sleeping.

    Example::

        cache = ResponseCache(ttl_seconds=60)
        cache.store("https://api.example.com/users", '[{"id": 1}]')
        cache.lookup("https://api.example.com/users")  # '[{"id": 1}]'
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Optional[Clock] = None,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock: Clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def lookup(self, url: str) -> Optional[str]:
        """Return the cached body for *url* if present and not expired.

        Returns:
            The cached response text on a hit, ``None`` on a miss or when
            the entry has expired. Expired entries are left in place.
        """
        with self._lock:
            entry = self._entries.get(url)
        if entry is None or entry.is_expired(self._clock(), self._ttl_seconds):
            return None
        return entry.content

    def store(self, url: str, content: str) -> CacheEntry:
        """Store *content* under *url*, replacing any previous entry.

        Returns:
            The newly created :class:`CacheEntry`.
        """
        entry = CacheEntry(content=content, created_at=self._clock())
        with self._lock:
            self._entries[url] = entry
        return entry

    def peek(self, url: str) -> Optional[CacheEntry]:
        """Return the raw entry for *url* regardless of freshness."""
        with self._lock:
            return self._entries.get(url)

    def clear(self) -> None:
        """Remove all entries from the cache."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, Any]:
        """Return cache statistics.

        Returns:
            A ``dict`` with ``size`` (entries held, expired ones included)
            and ``ttl_seconds``.
        """
        return {"size": len(self), "ttl_seconds": self._ttl_seconds}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._entries
