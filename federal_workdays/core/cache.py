"""
Bounded, expiring cache of holiday observance dates.

Observances are cheap to compute but are looked up for every year of every
range and count, so they are memoized per (holiday, year). Entries expire a
fixed time after being written and the least recently used entry is evicted
once the size bound is exceeded.
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Optional, Tuple

from federal_workdays.core.rules import observance_for

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000
DEFAULT_TTL_SECONDS = 600.0


@dataclass(frozen=True)
class ObservanceKey:
    """Cache key for a holiday in a given year."""

    holiday: Any
    year: int


class ObservanceCache:
    """Thread-safe LRU cache with per-entry time-to-live."""

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of live entries. 0 disables storage.
            ttl_seconds: Seconds an entry stays valid after being written.
            clock: Source of the current time in seconds.
        """
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must not be negative")

        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[ObservanceKey, Tuple[date, float]]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, holiday: Any, year: int) -> date:
        """
        Return the observance date of ``holiday`` in ``year``.

        The value is computed from the holiday's rule on a miss. The rule is
        evaluated outside the lock, so concurrent misses for one key may each
        compute it; the results are identical.

        Args:
            holiday: Registry member exposing a ``rule`` attribute.
            year: Calendar year.

        Returns:
            The weekend-adjusted observance date.
        """
        key = ObservanceKey(holiday, year)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                value, expires_at = entry
                if self._clock() < expires_at:
                    self._entries.move_to_end(key)
                    self._hits += 1
                    return value
                del self._entries[key]
            self._misses += 1

        value = observance_for(holiday.rule, year)
        logger.debug("Computed observance %s for %s %d", value, holiday, year)

        with self._lock:
            self._store(key, value)
        return value

    def _store(self, key: ObservanceKey, value: date) -> None:
        if self.max_size == 0:
            return
        now = self._clock()
        self._entries[key] = (value, now + self.ttl_seconds)
        self._entries.move_to_end(key)

        if len(self._entries) > self.max_size:
            self._purge_expired(now)
        while len(self._entries) > self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted observance for %s %d", evicted.holiday, evicted.year)

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, (_, expires_at) in self._entries.items() if expires_at <= now]
        for k in expired:
            del self._entries[k]

    def clear(self) -> None:
        """Drop all entries and reset the hit/miss counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        """Hit, miss and size counters."""
        with self._lock:
            return {"hits": self._hits, "misses": self._misses, "size": len(self._entries)}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_default_cache: Optional[ObservanceCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> ObservanceCache:
    """Process-wide cache, created on first use."""
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = ObservanceCache()
        return _default_cache


def configure_default_cache(
    max_size: int = DEFAULT_MAX_SIZE,
    ttl_seconds: float = DEFAULT_TTL_SECONDS,
    clock: Callable[[], float] = time.monotonic,
) -> ObservanceCache:
    """Replace the process-wide cache with one using the given settings."""
    global _default_cache
    cache = ObservanceCache(max_size=max_size, ttl_seconds=ttl_seconds, clock=clock)
    with _default_lock:
        _default_cache = cache
    logger.info("Observance cache configured: max_size=%d ttl=%ss", max_size, ttl_seconds)
    return cache


def reset_default_cache() -> None:
    """Discard the process-wide cache; the next lookup creates a fresh one."""
    global _default_cache
    with _default_lock:
        _default_cache = None
