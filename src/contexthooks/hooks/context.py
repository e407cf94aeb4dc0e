"""Render hook results as a prompt context block."""

from __future__ import annotations

from collections.abc import Iterable

from contexthooks.types.hooks import Hook, HookTrigger

CONTEXT_ENTRY_START_HEADER = "--- CONTEXT ENTRY BEGIN ---\n"
CONTEXT_ENTRY_END_HEADER = "--- CONTEXT ENTRY END ---\n\n"

_PREAMBLE = (
    "This section (like others) contains important information that I want you to use "
    "in your responses. I have gathered this context from valuable programmatic script "
    "hooks. You must follow any requests and consider all of the information in this section"
)


def format_hook_context(results: Iterable[tuple[Hook, str]], trigger: HookTrigger) -> str:
    """Format the results fired by *trigger* for inclusion in the prompt.

    Results from other triggers are ignored. Returns an empty string when
    nothing matches.
    """
    matching = [(hook, output) for hook, output in results if hook.trigger is trigger]
    if not matching:
        return ""

    parts = [CONTEXT_ENTRY_START_HEADER, _PREAMBLE]
    if trigger is HookTrigger.CONVERSATION_START:
        parts.append(" for the entire conversation")
    parts.append("\n\n")
    for hook, output in matching:
        parts.append(f"'{hook.label}': {output}\n\n")
    parts.append(CONTEXT_ENTRY_END_HEADER)
    return "".join(parts)
