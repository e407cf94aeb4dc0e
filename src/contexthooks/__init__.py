"""contexthooks: inject shell-command output into LLM conversations.

Usage:
    import asyncio
    from contexthooks import Hook, HookExecutor, HookTrigger

    executor = HookExecutor()
    hooks = [Hook.inline(HookTrigger.PER_PROMPT, "git status --short")]
    for hook, output in asyncio.run(executor.run_hooks(hooks)):
        print(hook.label, output)
"""

from contexthooks.hooks.cache import HookCache
from contexthooks.hooks.context import format_hook_context
from contexthooks.hooks.loader import hooks_from_config, load_hooks_file
from contexthooks.hooks.manager import HookExecutor
from contexthooks.hooks.policy import CacheMode, CachePolicy, effective_policy
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

__version__ = "0.1.0"

__all__ = [
    # Engine
    "HookExecutor",
    "HookCache",
    "CacheMode",
    "CachePolicy",
    "effective_policy",
    # Configuration
    "hooks_from_config",
    "load_hooks_file",
    "format_hook_context",
    # Types
    "CacheEntry",
    "Hook",
    "HookTrigger",
    "HookType",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_MAX_OUTPUT_SIZE",
    "DEFAULT_TIMEOUT_MS",
    "TRUNCATION_MARKER",
]
