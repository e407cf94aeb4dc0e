"""Trigger-dependent caching rules for hook output."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from contexthooks.types.hooks import HookTrigger


class CacheMode(Enum):
    """How a hook's output is cached."""

    NO_CACHE = "no_cache"
    FOREVER = "forever"
    EXPIRING = "expiring"


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """Effective caching decision for one hook run."""

    mode: CacheMode
    expiry: float | None = None

    @property
    def applies(self) -> bool:
        return self.mode is not CacheMode.NO_CACHE


NO_CACHE = CachePolicy(CacheMode.NO_CACHE)
FOREVER = CachePolicy(CacheMode.FOREVER)


def _session_scoped(ttl_seconds: int, now: float) -> CachePolicy:
    # ttl 0 means once per session
    if ttl_seconds > 0:
        return CachePolicy(CacheMode.EXPIRING, now + ttl_seconds)
    return FOREVER


def _opt_in(ttl_seconds: int, now: float) -> CachePolicy:
    if ttl_seconds > 0:
        return CachePolicy(CacheMode.EXPIRING, now + ttl_seconds)
    return NO_CACHE


_POLICY_BY_TRIGGER: dict[HookTrigger, Callable[[int, float], CachePolicy]] = {
    HookTrigger.CONVERSATION_START: _session_scoped,
    HookTrigger.PER_PROMPT: _opt_in,
}


def effective_policy(trigger: HookTrigger, ttl_seconds: int, now: float) -> CachePolicy:
    """Resolve the caching policy for *trigger* and *ttl_seconds*.

    Conversation-start hooks are always cached: a zero TTL keeps the entry
    for the life of the cache, a positive TTL expires it ``ttl_seconds``
    after *now*. Per-prompt hooks are only cached when the TTL is positive.
    """
    return _POLICY_BY_TRIGGER[trigger](ttl_seconds, now)
