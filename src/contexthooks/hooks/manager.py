"""Hook execution engine."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import TextIO

from contexthooks.hooks.cache import HookCache
from contexthooks.hooks.policy import effective_policy
from contexthooks.hooks.runner import run_command
from contexthooks.types.hooks import TRUNCATION_MARKER, CacheEntry, Hook, HookType

logger = logging.getLogger(__name__)


def truncate_output(output: str, max_size: int) -> str:
    """Cut *output* to *max_size* characters, marking the cut."""
    if len(output) <= max_size:
        return output
    return output[:max_size] + TRUNCATION_MARKER


class HookExecutor:
    """Runs hooks concurrently and caches their output per trigger policy.

    The executor owns its cache; entries live as long as the executor does.
    """

    def __init__(self, cache: HookCache | None = None, *, cwd: str | None = None) -> None:
        self._cache = cache if cache is not None else HookCache()
        self._cwd = cwd

    @property
    def cache(self) -> HookCache:
        return self._cache

    def clear_cache(self) -> None:
        self._cache.clear()

    async def run_hooks(
        self, hooks: Sequence[Hook], sink: TextIO | None = None,
    ) -> list[tuple[Hook, str]]:
        """Run *hooks* and return ``(hook, output)`` pairs in input order.

        Disabled hooks, hooks that time out and hooks that fail to start are
        left out of the result. Output of freshly run hooks is streamed to
        *sink*; cache hits write nothing.
        """
        slots: list[str | None] = [None] * len(hooks)

        async def _fill(index: int, hook: Hook) -> None:
            slots[index] = await self._run_hook(hook, sink)

        await asyncio.gather(*(
            _fill(i, hook) for i, hook in enumerate(hooks) if not hook.disabled
        ))
        return [
            (hook, output)
            for hook, output in zip(hooks, slots)
            if output is not None
        ]

    async def _run_hook(self, hook: Hook, sink: TextIO | None) -> str | None:
        policy = effective_policy(hook.trigger, hook.cache_ttl_seconds, self._cache.now())

        if policy.applies:
            cached = self._cache.get(hook)
            if cached is not None:
                logger.debug("Hook cache hit: %s", hook.label)
                return cached

        output = await self._execute(hook, sink)
        if output is None:
            return None

        output = truncate_output(output, hook.max_output_size)
        if policy.applies:
            self._cache.put(hook, CacheEntry(output=output, expiry=policy.expiry))
        return output

    async def _execute(self, hook: Hook, sink: TextIO | None) -> str | None:
        """Execute a single hook command. Returns None when the hook is dropped."""
        if hook.type is not HookType.INLINE:
            logger.warning("Unsupported hook type %s: %s", hook.type.value, hook.label)
            return None
        if hook.command is None:
            logger.debug("Skipping hook without a command")
            return None
        if not hook.command.strip():
            return ""

        result = await run_command(
            hook.command, timeout_sec=hook.timeout_sec, sink=sink, cwd=self._cwd,
        )
        if result.timed_out:
            logger.warning("Hook timed out after %dms: %s", hook.timeout_ms, hook.label)
            return None
        if result.error:
            logger.warning("Hook failed: %s: %s", hook.label, result.error)
            return None
        if result.exit_code != 0:
            logger.debug("Hook exited with status %d: %s", result.exit_code, hook.label)
        return result.output
