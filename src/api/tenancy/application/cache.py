"""In-process cache for team lookups by code.

A bounded map keyed by the exact team code. Positive entries (a team
exists) and negative entries (no team owns the code) expire independently,
negative ones usually much sooner so a freshly created team becomes
reachable quickly even if nobody invalidates.

Writers race with readers: a lookup that misses, goes to the database and
comes back after the code was invalidated must not store what it read. Each
key carries a generation counter; ``token()`` captures it before the
database round trip and ``put()`` refuses to store if it moved since.

Example:
    >>> cache = TeamLookupCache(max_size=100, ttl_seconds=60, negative_ttl_seconds=5)
    >>> token = cache.token("team-a")
    >>> cache.put("team-a", None, token)
    True
    >>> cache.get("team-a")
    CachedTeam(team=None)
"""

from __future__ import annotations

import dataclasses
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from tenancy.domain.aggregates import Team


@dataclass(frozen=True)
class CachedTeam:
    """A cache hit. ``team`` is None for a cached "no such team"."""

    team: Team | None


@dataclass
class _Entry:
    team: Team | None
    expires_at: float


class TeamLookupCache:
    """Thread-safe bounded TTL cache of team lookups.

    Stored teams are copied on the way in and out, so callers can never
    mutate a cached aggregate.
    """

    def __init__(
        self,
        max_size: int = 1024,
        ttl_seconds: float = 60.0,
        negative_ttl_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of codes held at once.
            ttl_seconds: Lifetime of an entry for an existing team.
            negative_ttl_seconds: Lifetime of an entry for an unknown code.
            clock: Monotonic time source, injectable for tests.

        Raises:
            ValueError: If a bound is not positive.
        """
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        if ttl_seconds <= 0 or negative_ttl_seconds <= 0:
            raise ValueError("TTLs must be positive")

        self._max_size = max_size
        self._ttl_seconds = ttl_seconds
        self._negative_ttl_seconds = negative_ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._generations: dict[str, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def get(self, code: str) -> CachedTeam | None:
        """Return the cached lookup for a code, or None on a miss."""
        with self._lock:
            entry = self._entries.get(code)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[code]
                return None
            return CachedTeam(team=_copy(entry.team))

    def token(self, code: str) -> tuple[int, int]:
        """Capture the current generation of a code before reading the source."""
        with self._lock:
            return (self._epoch, self._generations.get(code, 0))

    def put(self, code: str, team: Team | None, token: tuple[int, int]) -> bool:
        """Store a lookup result unless the code was invalidated since ``token``.

        Args:
            code: The team code that was looked up.
            team: The team found, or None when no team owns the code.
            token: Value returned by ``token(code)`` before the lookup.

        Returns:
            True if the result was stored.
        """
        with self._lock:
            if token != (self._epoch, self._generations.get(code, 0)):
                return False

            now = self._clock()
            ttl = self._ttl_seconds if team is not None else self._negative_ttl_seconds

            if code not in self._entries and len(self._entries) >= self._max_size:
                self._evict(now)

            self._entries[code] = _Entry(team=_copy(team), expires_at=now + ttl)
            return True

    def invalidate(self, code: str) -> None:
        """Drop a code and fence off lookups already in flight for it."""
        with self._lock:
            self._entries.pop(code, None)
            self._generations[code] = self._generations.get(code, 0) + 1
            if len(self._generations) > self._max_size:
                # Bounded map; the epoch bump keeps outstanding tokens stale.
                self._generations.clear()
                self._epoch += 1

    def clear(self) -> None:
        """Drop every entry and fence off all lookups in flight."""
        with self._lock:
            self._entries.clear()
            self._generations.clear()
            self._epoch += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict(self, now: float) -> None:
        # Caller holds the lock.
        expired = [code for code, e in self._entries.items() if e.expires_at <= now]
        for code in expired:
            del self._entries[code]

        # Dicts keep insertion order, so the first key is the oldest entry.
        while len(self._entries) >= self._max_size:
            del self._entries[next(iter(self._entries))]


def _copy(team: Team | None) -> Team | None:
    return dataclasses.replace(team) if team is not None else None
