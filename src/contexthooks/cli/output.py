"""Rich rendering for hook listings and results."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from contexthooks.types.hooks import Hook, HookTrigger

STYLE_TRIGGER = {
    HookTrigger.CONVERSATION_START: "bold #a78bfa",  # violet
    HookTrigger.PER_PROMPT: "bold #34d399",  # green
}
STYLE_COMMAND = "bold #e2e8f0"
STYLE_DIM = "dim #7c7c8a"
STYLE_WARNING = "bold #fbbf24"


def _ttl_display(hook: Hook) -> str:
    if hook.cache_ttl_seconds:
        return f"{hook.cache_ttl_seconds}s"
    if hook.trigger is HookTrigger.CONVERSATION_START:
        return "session"
    return "-"


def print_hooks_table(hooks: Sequence[Hook], console: Console) -> None:
    """Print configured hooks as a table."""
    table = Table(show_header=True, header_style="bold #94a3b8", box=None, pad_edge=False)
    table.add_column("Name")
    table.add_column("Trigger")
    table.add_column("Command", overflow="fold")
    table.add_column("Timeout", justify="right")
    table.add_column("Cache", justify="right")
    table.add_column("Scope")

    for hook in hooks:
        name = Text(hook.name or "-", style=STYLE_DIM if hook.disabled else "")
        if hook.disabled:
            name.append(" (disabled)", style=STYLE_DIM)
        table.add_row(
            name,
            Text(hook.trigger.value, style=STYLE_TRIGGER.get(hook.trigger, "")),
            Text(hook.command or "", style=STYLE_COMMAND),
            f"{hook.timeout_ms}ms",
            _ttl_display(hook),
            "global" if hook.is_global else "workspace",
        )

    console.print(table)
    console.print(f"\n{len(hooks)} hooks", style=STYLE_DIM)


def print_results(results: Sequence[tuple[Hook, str]], console: Console) -> None:
    """Print each hook's output in its own panel, in order."""
    for hook, output in results:
        console.print(Panel(
            Text(output.rstrip("\n")),
            title=Text(hook.label, style=STYLE_TRIGGER.get(hook.trigger, "")),
            title_align="left",
            border_style=STYLE_DIM,
        ))


def print_dropped(requested: int, returned: int, console: Console) -> None:
    """Warn when some hooks produced no result."""
    dropped = requested - returned
    if dropped > 0:
        console.print(
            f"{dropped} of {requested} hooks produced no output (timed out or failed to start)",
            style=STYLE_WARNING,
        )
