# viralcarrot/core/cache.py
# In-process TTL cache for computed responses
# - one instance per process (app.state.cache), handed to routes via Depends
# - entries are inserted once and read until they expire; expired ones are swept on insert
# - concurrent identical requests may both compute; the last write wins

from __future__ import annotations
import hashlib
import json
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Tuple

log = logging.getLogger(__name__)


def make_key(*parts: Any) -> str:
    """Stable key for a request signature (main food, ingredients, filters, page...)."""
    raw = json.dumps(parts, sort_keys=True, default=str, ensure_ascii=False)
    return hashlib.sha1(raw.encode("utf-8")).hexdigest()


class TTLCache:
    def __init__(self, clock: Callable[[], float] = time.monotonic, purge_interval: float = 60.0):
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        # expired keys nobody asks for again are swept on insert, at most once per interval
        self._purge_interval = purge_interval
        self._next_purge = clock() + purge_interval

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Any:
        hit = self._entries.get(key)
        if hit is None:
            return None
        expires_at, value = hit
        if self._clock() >= expires_at:
            self._entries.pop(key, None)
            return None
        return value

    def set(self, key: str, value: Any, ttl: float) -> None:
        now = self._clock()
        if now >= self._next_purge:
            dropped = self.purge_expired()
            self._next_purge = now + self._purge_interval
            if dropped:
                log.debug("cache purged %d expired entries", dropped)
        self._entries[key] = (now + ttl, value)

    async def get_or_compute(self, key: str, ttl: float, fn: Callable[[], Awaitable[Any]]) -> Any:
        value = self.get(key)
        if value is not None:
            log.debug("cache hit %s", key[:12])
            return value
        value = await fn()
        self.set(key, value, ttl)
        return value

    def purge_expired(self) -> int:
        now = self._clock()
        dead = [k for k, (exp, _) in self._entries.items() if now >= exp]
        for k in dead:
            self._entries.pop(k, None)
        return len(dead)

    def clear(self) -> None:
        self._entries.clear()
