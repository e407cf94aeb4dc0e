"""Hook execution: caching policy, cache store, runner and executor."""

from contexthooks.hooks.cache import HookCache
from contexthooks.hooks.context import format_hook_context
from contexthooks.hooks.loader import hooks_from_config, load_hooks_file
from contexthooks.hooks.manager import HookExecutor, truncate_output
from contexthooks.hooks.policy import CacheMode, CachePolicy, effective_policy

__all__ = [
    "CacheMode",
    "CachePolicy",
    "HookCache",
    "HookExecutor",
    "effective_policy",
    "format_hook_context",
    "hooks_from_config",
    "load_hooks_file",
    "truncate_output",
]
