"""Hook types for context injection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MAX_OUTPUT_SIZE = 1024 * 10
DEFAULT_CACHE_TTL_SECONDS = 0

TRUNCATION_MARKER = " ... truncated"


class HookTrigger(Enum):
    """Lifecycle points at which hooks fire."""

    CONVERSATION_START = "conversation_start"
    PER_PROMPT = "per_prompt"


class HookType(Enum):
    """How a hook is executed."""

    INLINE = "inline"


@dataclass(frozen=True, slots=True)
class Hook:
    """A command whose output is injected into the conversation."""

    trigger: HookTrigger
    command: str | None = None
    type: HookType = HookType.INLINE
    disabled: bool = False
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    max_output_size: int = DEFAULT_MAX_OUTPUT_SIZE
    cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS
    is_global: bool = False
    name: str = ""

    @classmethod
    def inline(cls, trigger: HookTrigger, command: str, **overrides: Any) -> Hook:
        """Build an inline hook with default limits."""
        return cls(trigger=trigger, command=command, type=HookType.INLINE, **overrides)

    @property
    def cache_key(self) -> tuple[HookTrigger, str | None]:
        """Identity used by the cache: trigger plus command text."""
        return (self.trigger, self.command)

    @property
    def label(self) -> str:
        """Display name: ``name`` if set, else the command text."""
        return self.name or self.command or ""

    @property
    def timeout_sec(self) -> float:
        """``timeout_ms`` in seconds, as asyncio timeouts expect."""
        return self.timeout_ms / 1000


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Cached hook output.

    ``expiry`` is an instant on the owning cache's clock; ``None`` keeps the
    entry until the cache is cleared or the process exits.
    """

    output: str
    expiry: float | None = None
