"""In-memory cache of hook output keyed by behavioral identity."""

from __future__ import annotations

import time
from collections.abc import Callable

from contexthooks.types.hooks import CacheEntry, Hook, HookTrigger


class HookCache:
    """Process-local store of hook output.

    Entries are keyed by ``Hook.cache_key`` (trigger and command), so two
    descriptors that differ only in limits or scope share an entry. Expiry is
    checked lazily on read; there is no background eviction.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[tuple[HookTrigger, str | None], CacheEntry] = {}

    def now(self) -> float:
        """Current instant on the cache's clock."""
        return self._clock()

    def get(self, hook: Hook) -> str | None:
        """Return cached output for *hook*, or None if absent or expired."""
        entry = self._entries.get(hook.cache_key)
        if entry is None:
            return None
        if entry.expiry is not None and entry.expiry <= self._clock():
            del self._entries[hook.cache_key]
            return None
        return entry.output

    def put(self, hook: Hook, entry: CacheEntry) -> None:
        self._entries[hook.cache_key] = entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, hook: object) -> bool:
        return isinstance(hook, Hook) and self.get(hook) is not None
