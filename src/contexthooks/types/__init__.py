"""Type definitions for contexthooks."""

from contexthooks.types.hooks import (
    DEFAULT_CACHE_TTL_SECONDS,
    DEFAULT_MAX_OUTPUT_SIZE,
    DEFAULT_TIMEOUT_MS,
    TRUNCATION_MARKER,
    CacheEntry,
    Hook,
    HookTrigger,
    HookType,
)

__all__ = [
    "CacheEntry",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_MAX_OUTPUT_SIZE",
    "DEFAULT_TIMEOUT_MS",
    "Hook",
    "HookTrigger",
    "HookType",
    "TRUNCATION_MARKER",
]
