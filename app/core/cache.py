"""
Per-process response cache.

Maps an entity id to ``(value, stored_at)``. An entry is served while
``now - stored_at < ttl`` and is dropped on the first read after that. There
is no size bound, no persistence and no sharing between processes: the
cached data is only consistent when the API runs as a single process, which
is how it is deployed.

Entries are stored under the entity's canonical id. Other ids a caller used
to reach the same entity (aliases, composite ids) point at that key, so
invalidating the canonical id drops the entry for every alias.
"""

import time
from typing import Any, Callable, Hashable, Iterable, Optional


class ResponseCache:
    """Fixed-window TTL cache keyed by entity id."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, tuple[Any, float]] = {}
        self._aliases: dict[Hashable, Hashable] = {}

    def _key(self, key: Hashable) -> Hashable:
        return self._aliases.get(key, key)

    def get(self, key: Hashable) -> Optional[Any]:
        key = self._key(key)
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at < self.ttl_seconds:
            return value
        self._entries.pop(key, None)
        return None

    def set(self, key: Hashable, value: Any, aliases: Iterable[Hashable] = ()) -> None:
        self._entries[key] = (value, self._clock())
        self._aliases.pop(key, None)
        for alias in aliases:
            if alias != key:
                self._aliases[alias] = key

    def invalidate(self, key: Hashable) -> None:
        self._entries.pop(self._key(key), None)
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()
        self._aliases.clear()

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
